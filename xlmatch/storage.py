# xlmatch/storage.py
"""
Volume and directory listings offered to the GUI for locating workbooks.
"""
import logging
import os
from typing import List

import psutil

logger = logging.getLogger(__name__)

SPREADSHEET_EXTENSIONS = (".xlsx", ".xlsm")


def list_drives() -> List[str]:
    """Device identifiers of every mounted partition, or [] if they cannot be enumerated."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, RuntimeError) as e:
        logger.warning("could not enumerate partitions: %s", e)
        return []
    drives = []
    for partition in partitions:
        logger.debug("partition %s mounted at %s", partition.device, partition.mountpoint)
        drives.append(partition.device)
    return drives


def list_files(dirname: str = ".") -> List[str]:
    try:
        names = sorted(os.listdir(dirname))
    except OSError as e:
        logger.warning("could not list %s: %s", dirname, e)
        return []
    return names


def list_spreadsheets(dirname: str = ".") -> List[str]:
    """Names in dirname with a workbook extension (.xlsx / .xlsm), case-insensitive."""
    return [
        name for name in list_files(dirname)
        if name.lower().endswith(SPREADSHEET_EXTENSIONS)
        and os.path.isfile(os.path.join(dirname, name))
    ]
