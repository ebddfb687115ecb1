from __future__ import annotations

import re
from typing import Dict, Optional

# AFINN-style word weights in [-5, 5].
_WEIGHTS: Dict[str, int] = {
    # positive
    "agree": 1,
    "award": 3,
    "awarded": 3,
    "beat": 1,
    "benefit": 2,
    "best": 3,
    "boost": 1,
    "breakthrough": 3,
    "celebrate": 3,
    "celebrates": 3,
    "charity": 2,
    "cure": 2,
    "delight": 3,
    "donate": 2,
    "donates": 2,
    "excellent": 3,
    "excited": 3,
    "gain": 2,
    "gains": 2,
    "good": 3,
    "great": 3,
    "growth": 2,
    "happy": 3,
    "help": 2,
    "helps": 2,
    "hero": 2,
    "hope": 2,
    "improve": 2,
    "improves": 2,
    "improving": 2,
    "inspiring": 3,
    "kind": 2,
    "love": 3,
    "outstanding": 5,
    "peace": 2,
    "positive": 2,
    "record": 1,
    "recovery": 2,
    "rescue": 2,
    "rescued": 2,
    "save": 2,
    "saved": 2,
    "strong": 2,
    "success": 2,
    "successful": 3,
    "superb": 5,
    "support": 2,
    "thrilled": 5,
    "triumph": 4,
    "win": 4,
    "wins": 4,
    "wonderful": 4,
    # negative
    "abuse": -3,
    "accident": -2,
    "arrest": -2,
    "arrested": -3,
    "attack": -1,
    "attacks": -1,
    "bad": -3,
    "collapse": -2,
    "crash": -2,
    "crisis": -3,
    "dead": -3,
    "death": -2,
    "decline": -1,
    "destroyed": -3,
    "disaster": -2,
    "drop": -1,
    "fail": -2,
    "fails": -2,
    "failure": -2,
    "fear": -2,
    "fire": -2,
    "fraud": -4,
    "hurt": -2,
    "injured": -2,
    "kill": -3,
    "killed": -3,
    "lawsuit": -2,
    "loss": -3,
    "murder": -2,
    "panic": -3,
    "protest": -2,
    "scandal": -3,
    "shooting": -2,
    "terrible": -3,
    "threat": -2,
    "tragedy": -2,
    "war": -2,
    "warning": -3,
    "worst": -3,
}

_NEGATORS = {"no", "not", "never", "don't", "doesn't", "isn't", "won't", "cannot", "can't"}

_WORD_RE = re.compile(r"[a-z']+")


def score_sentiment(text: Optional[str]) -> int:
    """Sum of lexicon weights for the words in ``text``.

    A negator directly before a weighted word flips that word's sign.
    """
    if not text:
        return 0
    tokens = _WORD_RE.findall(text.lower())
    total = 0
    for idx, token in enumerate(tokens):
        weight = _WEIGHTS.get(token)
        if weight is None:
            continue
        if idx > 0 and tokens[idx - 1] in _NEGATORS:
            weight = -weight
        total += weight
    return total


def positivity_from_score(raw_score: float) -> float:
    return raw_score / 10 + 0.5
