from activity_report.config import INTERVALS_PER_DAY


def inspect_activity(df):
    """
    Data quality checks on the loaded activity log: missing values,
    duplicates and continuity of the 5-minute grid.
    """
    total = len(df)
    missing = int(df['steps'].isna().sum())

    missing_by_date = df['steps'].isna().groupby(df['date']).agg(['sum', 'size'])
    all_missing = missing_by_date[missing_by_date['sum'] == missing_by_date['size']].index
    partly_missing = missing_by_date[(missing_by_date['sum'] > 0) &
                                     (missing_by_date['sum'] < missing_by_date['size'])].index

    n_dates = df['date'].nunique()
    duplicates = int(df.duplicated(subset=['date', 'interval']).sum())

    return {
        'rows': total,
        'missing_steps': missing,
        'missing_proportion': missing / total if total else 0.0,
        'dates': n_dates,
        'dates_all_missing': [d.strftime('%Y-%m-%d') for d in all_missing],
        'dates_partly_missing': [d.strftime('%Y-%m-%d') for d in partly_missing],
        'duplicate_intervals': duplicates,
        'expected_rows': n_dates * INTERVALS_PER_DAY,
        'start_date': df['date'].min(),
        'end_date': df['date'].max(),
    }


def print_inspection(report):
    print(f"\n--- Total Rows: {report['rows']} ---")
    print(f"Missing steps: {report['missing_steps']} ({report['missing_proportion']:.2%})")

    if report['duplicate_intervals']:
        print(f"Duplicate (date, interval) pairs found: {report['duplicate_intervals']}")
    else:
        print("No duplicate intervals.")

    print(f"\n--- Date Range: {report['start_date']:%Y-%m-%d} to {report['end_date']:%Y-%m-%d} ---")
    print(f"Expected count (5min intervals): {report['expected_rows']}")
    print(f"Actual count: {report['rows']}")
    if report['rows'] != report['expected_rows']:
        print(f"MISSING INTERVALS: {report['expected_rows'] - report['rows']}")

    if report['dates_all_missing']:
        print(f"Days with no data ({len(report['dates_all_missing'])}): {', '.join(report['dates_all_missing'])}")
    if report['dates_partly_missing']:
        print(f"Days with partial data: {', '.join(report['dates_partly_missing'])}")
