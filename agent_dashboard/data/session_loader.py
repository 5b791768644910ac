#region Imports
import json
from pathlib import Path
from typing import Any, Iterator

from agent_dashboard.models.session_record import SessionRecord
from agent_dashboard.utils.log import get_logger
#endregion


logger = get_logger(__name__)


#region Functions


def parse_sessions_jsonl(file_path: Path) -> Iterator[SessionRecord]:
    """
    Parse a JSONL sessions file and yield SessionRecord objects.

    Blank lines are ignored; malformed lines (including undecodable bytes)
    and non-object values are skipped with a warning.

    Args:
        file_path: Path to the JSONL file

    Yields:
        SessionRecord for each JSON object line
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue

            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Skipping malformed JSON at %s:%d: %s", file_path, line_num, e)
                continue

            if isinstance(data, dict):
                yield SessionRecord.from_mapping(data)
            else:
                logger.warning("Skipping non-object session at %s:%d", file_path, line_num)


def parse_sessions_json(data: Any) -> list[SessionRecord]:
    """
    Build session records from a decoded JSON document.

    Accepts either a list of session objects or an object with a
    'sessions' list.

    Args:
        data: Decoded JSON

    Returns:
        List of SessionRecord objects (non-object entries are skipped)
    """
    if isinstance(data, dict):
        data = data.get("sessions", [])
    if not isinstance(data, list):
        logger.warning("Sessions document is neither a list nor an object with 'sessions'")
        return []

    records = []
    for entry in data:
        if isinstance(entry, dict):
            records.append(SessionRecord.from_mapping(entry))
        else:
            logger.warning("Skipping non-object session entry: %r", entry)
    return records


def load_sessions(file_path: Path) -> list[SessionRecord]:
    """
    Load the session list written by the agent runner.

    '.jsonl' files are read line by line; anything else is read as one
    JSON document.

    Args:
        file_path: Path to the sessions file

    Returns:
        List of SessionRecord objects

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file can't be read
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Sessions file not found: {file_path}")

    if file_path.suffix == ".jsonl":
        return list(parse_sessions_jsonl(file_path))

    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Sessions file %s is not valid JSON: %s", file_path, e)
        return []

    return parse_sessions_json(data)


#endregion
