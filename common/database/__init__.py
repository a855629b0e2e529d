"""
Database module - Async MongoDB connection using Motor.

Usage:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri, database_name)
    collection = db.db["systemConfig"]
"""

from common.database.mongodb import MongoDB

__all__ = ["MongoDB"]
