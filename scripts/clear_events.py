#!/usr/bin/env python3

import logging
import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from eventrecords.db import EventStore, get_database

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def clear_all_events():
    """Clear all events from the database"""
    store = EventStore(get_database()).open()
    count = store.clear()
    logger.info(f"Cleared {count} events from database")

if __name__ == "__main__":
    clear_all_events()
