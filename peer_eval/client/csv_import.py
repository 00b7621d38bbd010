"""
Roster and team CSV parsing for admin uploads
"""
import csv
import io
from pathlib import Path
from typing import Dict, List, Union


def parse_peers_csv(text: str) -> List[str]:
    """
    Parse a peers file: one USN per line

    Blank lines are skipped; only the first column of each row is used.

    Example:
        >>> parse_peers_csv("1RV21CS001\\n\\n1rv21cs002\\n")
        ['1RV21CS001', '1rv21cs002']
    """
    usns = []
    for row in csv.reader(io.StringIO(text)):
        if row and row[0].strip():
            usns.append(row[0].strip())
    return usns


def parse_teams_csv(text: str) -> List[Dict]:
    """
    Parse a teams file: ``name,member1,member2,...`` per line

    Rows without a name or without any member are dropped.

    Example:
        >>> parse_teams_csv("Alpha, 1RV001, 1RV002\\nEmpty,\\n")
        [{'name': 'Alpha', 'members': ['1RV001', '1RV002']}]
    """
    teams = []
    for row in csv.reader(io.StringIO(text)):
        parts = [part.strip() for part in row]
        if not parts:
            continue
        name, members = parts[0], [m for m in parts[1:] if m]
        if name and members:
            teams.append({"name": name, "members": members})
    return teams


def read_csv_file(path: Union[str, Path]) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
