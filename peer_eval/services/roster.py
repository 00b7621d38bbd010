"""Peer directory: eligible USNs, replaced wholesale on upload"""
import logging
from typing import Dict, List, Optional

from peer_eval import state
from peer_eval.errors import ValidationFailure
from peer_eval.models import Peer


logger = logging.getLogger(__name__)


def normalize_usn(usn: str) -> str:
    return usn.strip().upper()


def _validate_usns(usns: List) -> List[str]:
    """Normalize a whole batch, or raise before anything is stored"""
    if not isinstance(usns, list):
        raise ValidationFailure("Invalid peers data")

    clean = []
    for idx, usn in enumerate(usns):
        if not isinstance(usn, str) or not usn.strip():
            raise ValidationFailure(f"Invalid peer data format at row {idx + 1}")
        clean.append(normalize_usn(usn))
    return clean


def replace_peers(usns: List[str]) -> List[Peer]:
    """
    Replace the whole peer directory

    The batch is validated into a fresh mapping first and swapped in only if
    every entry is valid; a rejected batch leaves the old directory intact.
    Duplicate USNs collapse to one peer.

    Raises:
        ValidationFailure: If the batch is not a list or contains a blank USN
    """
    clean = _validate_usns(usns)

    with state.LOCK:
        staged: Dict[str, Peer] = {}
        for usn in clean:
            if usn not in staged:
                staged[usn] = Peer(id=state.next_id("peer"), usn=usn)
        state.PEERS.clear()
        state.PEERS.update(staged)

    logger.info(f"✅ Peer directory replaced with {len(staged)} peers")
    return list(staged.values())


def get_all_peers() -> List[Peer]:
    return list(state.PEERS.values())


def get_peer_by_usn(usn: str) -> Optional[Peer]:
    return state.PEERS.get(normalize_usn(usn))
