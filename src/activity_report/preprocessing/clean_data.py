import os

import pandas as pd

from activity_report.config import IMPUTED_FILE


def format_interval(code):
    # code: HHMM without colon, e.g. 5 -> '00:05', 2355 -> '23:55'
    s = str(int(code)).zfill(4)
    return f"{s[:2]}:{s[2:]}"


def parse_interval(label):
    hh, mm = label.split(':')
    return int(hh) * 100 + int(mm)


def normalize_intervals(codes):
    return codes.map(format_interval)


def impute_missing(df, profile):
    """
    Fill missing steps with the mean of the same interval across all days.

    profile: Series of mean steps indexed by 'HH:MM' interval label.
    Non-missing rows are returned unchanged. Means are kept as floats (no rounding).
    An interval without any observed value has an undefined mean and is filled with 0.
    """
    df_imputed = df.copy()

    missing_mask = df_imputed['steps'].isna()
    fill_values = df_imputed['interval'].map(profile).astype(float)

    no_mean = missing_mask & fill_values.isna()
    if no_mean.sum() > 0:
        print(f"Warning: {no_mean.sum()} missing values in intervals with no observed data, filled with 0")
    fill_values = fill_values.fillna(0.0)

    df_imputed.loc[missing_mask, 'steps'] = fill_values[missing_mask]

    print(f"Filled {missing_mask.sum()} missing step values with interval means.")
    return df_imputed


def save_imputed(df, output_file=IMPUTED_FILE):
    output_dir = os.path.dirname(output_file)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    if 'interval_code' in df.columns:
        codes = df['interval_code']
    else:
        codes = df['interval'].map(parse_interval)

    out = pd.DataFrame({
        'steps': df['steps'],
        'date': df['date'].dt.strftime('%Y-%m-%d'),
        'interval': codes,
    })
    out.to_csv(output_file, index=False)
    print(f"Saved imputed data to {output_file}")
    return output_file
