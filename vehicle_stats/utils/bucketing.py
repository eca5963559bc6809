# vehicle_stats/utils/bucketing.py
from datetime import date, timedelta

EPOCH = date(1970, 1, 1)
BUCKET_DAYS = 10

def bucket_start(day: date) -> date:
    offset = (day - EPOCH).days // BUCKET_DAYS * BUCKET_DAYS
    return EPOCH + timedelta(days=offset)

def bucket_key(day: date) -> str:
    return bucket_start(day).isoformat()
