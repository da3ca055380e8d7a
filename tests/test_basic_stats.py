import numpy as np
import pandas as pd
import pytest

from activity_report.analysis.basic_stats import (
    daily_totals,
    interval_profile,
    peak_intervals,
    summarize_totals,
)


def test_daily_totals(activity):
    totals = daily_totals(activity)

    assert len(totals) == 3
    assert np.isnan(totals[pd.Timestamp('2012-10-01')])
    assert totals[pd.Timestamp('2012-10-02')] == 12
    assert totals[pd.Timestamp('2012-10-06')] == 18


def test_complete_days_sum_to_observed_steps(activity):
    totals = daily_totals(activity)
    assert totals.dropna().sum() == activity['steps'].sum()


def test_partially_missing_day_has_no_total():
    df = pd.DataFrame({
        'steps': [np.nan, 100.0, 5.0, 5.0],
        'date': pd.to_datetime(['2012-10-01', '2012-10-01', '2012-10-02', '2012-10-02']),
        'interval': ['00:00', '00:05', '00:00', '00:05'],
    })
    totals = daily_totals(df)
    assert np.isnan(totals[pd.Timestamp('2012-10-01')])
    assert summarize_totals(totals)['mean'] == 10.0


def test_missing_day_excluded_from_summary(activity):
    summary = summarize_totals(daily_totals(activity))

    # Zero-filling the missing day would give mean 10 and median 12
    assert summary['mean'] == 15.0
    assert summary['median'] == 15.0
    assert summary['days_used'] == 2
    assert summary['days_excluded'] == 1


def test_summary_without_data():
    summary = summarize_totals(pd.Series([np.nan, np.nan]))
    assert np.isnan(summary['mean'])
    assert summary['days_used'] == 0


def test_interval_profile(activity):
    profile = interval_profile(activity)

    assert list(profile.index) == ['00:00', '00:05', '23:55']
    assert profile['00:00'] == 2.0
    assert profile['00:05'] == 3.0
    assert profile['23:55'] == 10.0


def test_interval_profile_one_entry_per_interval(activity):
    profile = interval_profile(activity)
    assert set(profile.index) == set(activity['interval'].unique())
    assert profile.index.is_unique


def test_interval_profile_sorted_chronologically():
    df = pd.DataFrame({
        'steps': [1.0, 2.0, 3.0],
        'date': pd.to_datetime(['2012-10-01'] * 3),
        'interval': ['10:00', '00:05', '09:55'],
    })
    assert list(interval_profile(df).index) == ['00:05', '09:55', '10:00']


def test_peak_intervals(activity):
    assert peak_intervals(interval_profile(activity)) == ['23:55']


def test_peak_intervals_ties_in_interval_order():
    profile = pd.Series({'08:35': 206.0, '00:05': 1.0, '08:30': 206.0})
    assert peak_intervals(profile) == ['08:30', '08:35']


def test_peak_intervals_empty_profile():
    assert peak_intervals(pd.Series([np.nan], index=['00:00'])) == []
