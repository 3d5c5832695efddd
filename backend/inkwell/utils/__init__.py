from datetime import datetime, timezone
import uuid


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp (naive, as stored in the database)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_id() -> str:
    """Generate a new primary key"""
    return str(uuid.uuid4())
