import sys

from activity_report.run_report import main

if __name__ == "__main__":
    sys.exit(main())
