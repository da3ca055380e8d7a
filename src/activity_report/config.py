import os

# Configuration
DATA_URL = 'https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2Factivity.zip'
DATA_DIR = 'data'
FILE_PATH = os.path.join(DATA_DIR, 'activity.csv')
ZIP_PATH = os.path.join(DATA_DIR, 'activity.zip')
IMPUTED_FILE = os.path.join(DATA_DIR, 'activity_imputed.csv')
OUTPUT_DIR = 'figures'

FIGURE_DPI = 300

# 5-minute intervals, 00:00 to 23:55
INTERVALS_PER_DAY = 288
DAY_TYPES = ['Weekday', 'Weekend']
