import numpy as np
import pandas as pd
import pytest

from activity_report.preprocessing.clean_data import normalize_intervals

# Three days x three intervals. 2012-10-01 (Mon) has no data,
# 2012-10-02 is a Tuesday, 2012-10-06 a Saturday.
RAW_ROWS = [
    (np.nan, '2012-10-01', 0), (np.nan, '2012-10-01', 5), (np.nan, '2012-10-01', 2355),
    (0, '2012-10-02', 0), (2, '2012-10-02', 5), (10, '2012-10-02', 2355),
    (4, '2012-10-06', 0), (4, '2012-10-06', 5), (10, '2012-10-06', 2355),
]


@pytest.fixture
def raw_activity():
    return pd.DataFrame(RAW_ROWS, columns=['steps', 'date', 'interval'])


@pytest.fixture
def activity(raw_activity):
    df = raw_activity.copy()
    df['steps'] = df['steps'].astype(float)
    df['date'] = pd.to_datetime(df['date'])
    df['interval_code'] = df['interval']
    df['interval'] = normalize_intervals(df['interval_code'])
    return df[['steps', 'date', 'interval', 'interval_code']]


@pytest.fixture
def activity_csv(tmp_path, raw_activity):
    path = tmp_path / 'data' / 'activity.csv'
    path.parent.mkdir()
    raw_activity.to_csv(path, index=False, na_rep='NA')
    return path
