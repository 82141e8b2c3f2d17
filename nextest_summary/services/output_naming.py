from pathlib import PurePath
from typing import Optional, Union

SUMMARY_EXTENSIONS = ("log", "txt")


def derive_output_name(path: Union[str, PurePath]) -> Optional[str]:
    """
    "run1.log" -> "run1-summary.log". Anything whose extension is not exactly
    "log" or "txt" (case-sensitive) gives None and is skipped by the batch.
    """
    name = PurePath(path).name
    if not name:
        return None

    # PurePath treats ".log" as a stem with no suffix.
    suffix = PurePath(name).suffix
    extension = suffix[1:]
    if extension not in SUMMARY_EXTENSIONS:
        return None

    stem = PurePath(name).stem
    return f"{stem}-summary.{extension}"
