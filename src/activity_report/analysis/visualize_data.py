import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from activity_report.config import FIGURE_DPI, OUTPUT_DIR

# Set style
sns.set_theme(style="whitegrid")
plt.rcParams['font.family'] = 'sans-serif'


def save_figure(output_dir, filename):
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
    output_file = os.path.join(output_dir, filename)
    plt.tight_layout()
    plt.savefig(output_file, dpi=FIGURE_DPI)
    plt.close()
    print(f"Saved {output_file}")
    return output_file


def plot_daily_histogram(totals, title, filename, output_dir=OUTPUT_DIR, color='#1f77b4'):
    """Histogram of daily step totals with the mean marked. NaN days are left out."""
    valid = totals.dropna()
    mean_val = valid.mean()

    plt.figure(figsize=(10, 6))
    sns.histplot(valid, bins=20, color=color)
    plt.axvline(mean_val, color='#d62728', linestyle='--', linewidth=2, label=f'Mean: {mean_val:,.0f}')
    plt.title(title, fontsize=16, fontweight='bold')
    plt.xlabel('Total Steps per Day')
    plt.ylabel('Number of Days')
    plt.legend()
    return save_figure(output_dir, filename)


def plot_activity_pattern(profile, output_dir=OUTPUT_DIR, peak=None):
    time_labels = list(profile.index)
    x = range(len(time_labels))

    plt.figure(figsize=(12, 6))
    plt.plot(x, profile.values, color='#ff7f0e', linewidth=2)

    if peak is not None:
        peak_pos = time_labels.index(peak)
        plt.scatter([peak_pos], [profile[peak]], color='#d62728', zorder=3)
        plt.annotate(f'Peak {peak}: {profile[peak]:.1f}', xy=(peak_pos, profile[peak]),
                     xytext=(10, -5), textcoords='offset points')

    plt.title('Average Daily Activity Pattern', fontsize=16, fontweight='bold')
    plt.xlabel('Time of Day')
    plt.ylabel('Average Steps (5-min interval)')

    # Show every 2 hours
    plt.xticks(ticks=range(0, len(time_labels), 24), labels=time_labels[::24], rotation=45)

    plt.grid(True, linestyle='--', alpha=0.7)
    return save_figure(output_dir, 'figure_2_daily_activity_pattern.png')
