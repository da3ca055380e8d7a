"""
Step activity report.

Loads the 5-minute step log (downloading it if needed), then answers:
1. Mean/median total steps per day
2. Average daily activity pattern and the peak interval
3. Missing values and the effect of filling them with interval means
4. Weekday vs weekend activity patterns
"""

import urllib.error
import zipfile

from activity_report.analysis.basic_stats import (
    daily_totals,
    interval_profile,
    peak_intervals,
    print_summary,
    summarize_totals,
)
from activity_report.analysis.visualize_data import plot_activity_pattern, plot_daily_histogram
from activity_report.analysis.visualize_weekday_weekend import (
    add_day_type,
    day_type_profiles,
    day_type_summary,
    plot_weekday_weekend,
)
from activity_report.config import DATA_URL, FILE_PATH, IMPUTED_FILE, OUTPUT_DIR
from activity_report.preprocessing.clean_data import impute_missing, save_imputed
from activity_report.preprocessing.inspect_data import inspect_activity, print_inspection
from activity_report.preprocessing.load_data import ensure_data, load_activity


def run_report(file_path=FILE_PATH, output_dir=OUTPUT_DIR, imputed_file=IMPUTED_FILE, url=DATA_URL):
    # 1. Load Data
    ensure_data(file_path, url)
    print("Loading data...")
    df = load_activity(file_path)
    print(f"Data Loaded. Range: {df['date'].min():%Y-%m-%d} to {df['date'].max():%Y-%m-%d}")

    inspection = inspect_activity(df)
    print_inspection(inspection)

    # 2. Steps per day (missing days excluded)
    totals = daily_totals(df)
    before = summarize_totals(totals)
    print_summary('Total Steps per Day', before)

    # 3. Daily activity pattern
    profile = interval_profile(df)
    peaks = peak_intervals(profile)
    peak = peaks[0] if peaks else None
    if len(peaks) > 1:
        print(f"Tied peak intervals: {peaks}, using {peak}")
    if peak is not None:
        print(f"\nPeak interval: {peak} ({profile[peak]:.2f} steps on average)")

    # 4. Imputation
    print("\n--- Imputing Missing Values ---")
    print(f"Missing: {inspection['missing_steps']} of {inspection['rows']} ({inspection['missing_proportion']:.2%})")
    df_imputed = impute_missing(df, profile)
    save_imputed(df_imputed, imputed_file)

    totals_imputed = daily_totals(df_imputed)
    after = summarize_totals(totals_imputed)
    print_summary('Total Steps per Day (Imputed)', after)

    # 5. Weekday vs Weekend
    df_imputed = add_day_type(df_imputed)
    profiles = day_type_profiles(df_imputed)
    print("\n--- Statistics: Weekday vs Weekend (Daily Totals) ---")
    print(day_type_summary(df_imputed))

    # 6. Plotting
    print("\nGenerating Figures...")
    figures = [
        plot_daily_histogram(totals, 'Total Steps per Day',
                             'figure_1_daily_steps_histogram.png', output_dir),
        plot_activity_pattern(profile, output_dir, peak=peak),
        plot_daily_histogram(totals_imputed, 'Total Steps per Day (Missing Values Imputed)',
                             'figure_3_imputed_daily_steps_histogram.png', output_dir, color='#2ca02c'),
        plot_weekday_weekend(profiles, output_dir),
    ]

    return {
        'mean_before': before['mean'],
        'median_before': before['median'],
        'mean_after': after['mean'],
        'median_after': after['median'],
        'missing_steps': inspection['missing_steps'],
        'missing_proportion': inspection['missing_proportion'],
        'peak_interval': peak,
        'figures': figures,
    }


def main():
    print("\nStep Activity Report")
    print("=" * 70)

    try:
        run_report()
    except FileNotFoundError as e:
        print(f"Error: File not found ({e})")
        return 1
    except (urllib.error.URLError, zipfile.BadZipFile, ValueError) as e:
        print(f"An error occurred: {e}")
        return 1

    print("\n" + "=" * 70)
    print("All figures generated successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
