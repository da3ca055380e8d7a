import os
import shutil
import urllib.request
import zipfile

import pandas as pd

from activity_report.config import DATA_DIR, DATA_URL, FILE_PATH, ZIP_PATH
from activity_report.preprocessing.clean_data import normalize_intervals

REQUIRED_COLUMNS = ['steps', 'date', 'interval']


def download_data(url=DATA_URL, zip_path=ZIP_PATH, data_dir=DATA_DIR):
    """
    Fetch the zipped activity log, extract it into data_dir and remove the archive.
    Network and archive errors propagate to the caller.
    """
    if not os.path.exists(data_dir):
        os.makedirs(data_dir)

    print(f"Downloading {url}...")
    with urllib.request.urlopen(url) as f_src, open(zip_path, 'wb') as f_dst:
        shutil.copyfileobj(f_src, f_dst)

    print(f"Extracting {zip_path}...")
    try:
        with zipfile.ZipFile(zip_path) as z:
            names = z.namelist()
            z.extractall(data_dir)
    finally:
        os.remove(zip_path)
    print(f"Extracted {names} to {data_dir}")
    return names


def ensure_data(file_path=FILE_PATH, url=DATA_URL):
    if os.path.exists(file_path):
        return file_path

    print(f"{file_path} not found, fetching source archive.")
    data_dir = os.path.dirname(file_path) or '.'
    zip_path = os.path.join(data_dir, os.path.basename(ZIP_PATH))
    download_data(url, zip_path, data_dir)

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"{file_path} was not found in the downloaded archive")
    return file_path


def load_activity(file_path=FILE_PATH):
    """
    Read the activity CSV into a DataFrame.

    Columns after loading:
    - steps: float, NaN where the source has NA
    - date: datetime64 (calendar date)
    - interval_code: raw HHMM integer code (0..2355)
    - interval: 'HH:MM' label
    """
    df = pd.read_csv(file_path)

    missing_cols = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing_cols:
        raise ValueError(f"{file_path}: missing required columns {missing_cols}")

    df['steps'] = pd.to_numeric(df['steps'], errors='coerce').astype(float)
    df['date'] = pd.to_datetime(df['date'].astype(str))
    df['interval_code'] = df['interval'].astype(int)
    df['interval'] = normalize_intervals(df['interval_code'])

    return df[['steps', 'date', 'interval', 'interval_code']]
