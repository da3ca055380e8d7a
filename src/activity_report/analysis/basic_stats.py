import numpy as np


def daily_totals(df):
    """
    Total steps per date.
    A date with any missing value gets NaN (no data), never a partial sum or zero,
    so it drops out of the mean/median below.
    """
    totals = df.groupby('date')['steps'].agg(lambda s: s.sum(skipna=False))
    totals.name = 'total_steps'
    return totals


def summarize_totals(totals):
    valid = totals.dropna()
    return {
        'mean': valid.mean() if len(valid) else np.nan,
        'median': valid.median() if len(valid) else np.nan,
        'days_used': len(valid),
        'days_excluded': int(totals.isna().sum()),
    }


def interval_profile(df):
    # Mean over observed values only; 'HH:MM' labels sort chronologically
    profile = df.groupby('interval')['steps'].mean().sort_index()
    profile.name = 'mean_steps'
    return profile


def peak_intervals(profile):
    """
    All intervals whose mean equals the maximum, in interval order.
    Callers wanting a single value take the first.
    """
    max_val = profile.max()
    if np.isnan(max_val):
        return []
    return list(profile[profile == max_val].sort_index().index)


def print_summary(title, summary):
    print(f"\n[{title}]")
    print(f"Days used: {summary['days_used']} (excluded: {summary['days_excluded']})")
    print(f"Mean: {summary['mean']:.2f} steps/day")
    print(f"Median: {summary['median']:.2f} steps/day")
