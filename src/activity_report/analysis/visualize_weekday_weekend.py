import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from activity_report.analysis.basic_stats import daily_totals
from activity_report.analysis.visualize_data import save_figure
from activity_report.config import DAY_TYPES, OUTPUT_DIR

# Set style
sns.set_theme(style="whitegrid")
plt.rcParams['font.family'] = 'sans-serif'

# Define colors consistent with the other figures
pal = {'Weekday': '#1f77b4', 'Weekend': '#ff7f0e'}


def classify_day(value):
    # 0=Mon, 6=Sun
    return 'Weekend' if pd.Timestamp(value).weekday() >= 5 else 'Weekday'


def add_day_type(df):
    df = df.copy()
    day_type = df['date'].map(classify_day)
    df['day_type'] = pd.Categorical(day_type, categories=DAY_TYPES)
    return df


def day_type_profiles(df):
    """Mean steps per interval, one column per day type."""
    if 'day_type' not in df.columns:
        df = add_day_type(df)
    profile = df.groupby(['interval', 'day_type'], observed=False)['steps'].mean()
    return profile.unstack('day_type').sort_index()


def day_type_summary(df):
    totals = daily_totals(df)
    day_types = totals.index.to_series().map(classify_day)
    return totals.groupby(day_types).describe()


def plot_weekday_weekend(profiles, output_dir=OUTPUT_DIR):
    time_labels = list(profiles.index)
    x = range(len(time_labels))

    fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True, sharey=True)

    for ax, day_type in zip(axes, ['Weekend', 'Weekday']):
        ax.plot(x, profiles[day_type].values, color=pal[day_type], linewidth=2)
        ax.set_title(day_type, fontsize=14, fontweight='bold')
        ax.set_ylabel('Average Steps')
        ax.grid(True, linestyle='--', alpha=0.7)

    axes[-1].set_xlabel('Time of Day')
    axes[-1].set_xticks(range(0, len(time_labels), 24))
    axes[-1].set_xticklabels(time_labels[::24], rotation=45)

    fig.suptitle('Average Activity Pattern: Weekday vs Weekend', fontsize=16, fontweight='bold')
    return save_figure(output_dir, 'figure_4_weekday_weekend_pattern.png')
