"""Rule-based politeness normalization of sentence endings.

Only the sentence-final clause is rewritten.  Interior blunt connectives
(〜だが、) are rewritten as a second pass once the sentence ends polite, so
a sentence never mixes a polite ending with a blunt interior.  Anything
without a table match comes back unchanged.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from kuchikomi.normalization.endings import (
    CONNECTIVE_REWRITES,
    ENDING_REWRITES,
    POLITE_ENDINGS,
)

_SENTENCE = re.compile(r"[^。！？!?]+[。！？!?]*|[。！？!?]+")
_TAIL = re.compile(r"[。．！!？?♪☆★…〜~\s]+$")

# Appended to a sentence that no rewrite could make polite
POLITE_CLOSE = "です"

# Godan past forms such as 並んだ or 住んだ.  The copula rule must not turn
# them into 並んです; the dictionary form is ambiguous, so they are closed
# generically instead.
_GODAN_NDA = re.compile(r"[\u4e00-\u9fff々]んだ$")

# Plain past forms the suffix table cannot conjugate (盛り上がった, 歩いた)
_PLAIN_PAST = re.compile(r"(?:た|[\u4e00-\u9fff々]んだ)$")
PAST_CLOSE = "んです"

# Volitional forms (行こう, 食べよう)
_VOLITIONAL = re.compile(r"(?:[\u4e00-\u9fff々][こともろごぼおの]う|[えけげせてねべめれきぎしにびみり]よう)$")
VOLITIONAL_CLOSE = "と思います"


def split_sentences(text: str) -> list[str]:
    """Split *text* into sentences, each keeping its terminal punctuation."""
    return _SENTENCE.findall(text or "")


def _split_tail(sentence: str) -> tuple[str, str]:
    match = _TAIL.search(sentence)
    if match is None:
        return sentence, ""
    return sentence[: match.start()], match.group(0)


class SentenceNormalizer:
    """Rewrites plain-register endings using suffix tables."""

    def __init__(
        self,
        endings: Optional[Mapping[str, str]] = None,
        connectives: Optional[Mapping[str, str]] = None,
        polite_endings: tuple[str, ...] = POLITE_ENDINGS,
    ) -> None:
        self._endings = dict(ENDING_REWRITES if endings is None else endings)
        self._polite_endings = polite_endings
        self._max_suffix = max((len(k) for k in self._endings), default=0)

        connectives = dict(CONNECTIVE_REWRITES if connectives is None else connectives)
        self._connectives = connectives
        if connectives:
            alternation = "|".join(
                re.escape(k) for k in sorted(connectives, key=len, reverse=True)
            )
            self._connective_re: Optional[re.Pattern[str]] = re.compile(
                rf"({alternation})(?=[、，,\s])"
            )
        else:
            self._connective_re = None

    def normalize(self, text: str) -> str:
        """Rewrite each sentence's final ending to the polite register."""
        return "".join(self._normalize_sentence(s) for s in split_sentences(text))

    def ensure_polite(self, text: str) -> str:
        """Normalize, then close any still-plain sentence.

        Plain past forms get んです, volitional forms と思います, anything else
        です.  Interior connectives are rewritten on the closed sentence too.
        """
        closed: list[str] = []
        for sentence in split_sentences(self.normalize(text)):
            body, tail = _split_tail(sentence)
            if body.strip() and not self._ends_polite(body):
                body = self._rewrite_connectives(self._close(body.rstrip()))
            closed.append(body + tail)
        return "".join(closed)

    def is_polite(self, text: str) -> bool:
        """True if the last non-empty sentence of *text* ends polite."""
        for sentence in reversed(split_sentences(text)):
            body, _ = _split_tail(sentence)
            if body.strip():
                return self._ends_polite(body)
        return False

    # ── internal ────────────────────────────────────────────────────

    def _ends_polite(self, body: str) -> bool:
        return body.rstrip().endswith(self._polite_endings)

    def _close(self, body: str) -> str:
        if _PLAIN_PAST.search(body):
            return body + PAST_CLOSE
        if _VOLITIONAL.search(body):
            return body + VOLITIONAL_CLOSE
        return body + POLITE_CLOSE

    def _normalize_sentence(self, sentence: str) -> str:
        body, tail = _split_tail(sentence)
        if not body.strip():
            return sentence

        if not self._ends_polite(body):
            rewritten = self._rewrite_ending(body)
            if rewritten is None:
                return sentence
            body = rewritten

        return self._rewrite_connectives(body) + tail

    def _rewrite_ending(self, body: str) -> Optional[str]:
        for size in range(min(len(body), self._max_suffix), 0, -1):
            suffix = body[-size:]
            if suffix in self._endings:
                if suffix == "だ" and _GODAN_NDA.search(body):
                    return None
                return body[:-size] + self._endings[suffix]
        return None

    def _rewrite_connectives(self, body: str) -> str:
        if self._connective_re is None:
            return body
        return self._connective_re.sub(lambda m: self._connectives[m.group(1)], body)


_DEFAULT = SentenceNormalizer()


def normalize(text: str) -> str:
    """Module-level shortcut using the default tables."""
    return _DEFAULT.normalize(text)


def ensure_polite(text: str) -> str:
    return _DEFAULT.ensure_polite(text)


def is_polite(text: str) -> bool:
    return _DEFAULT.is_polite(text)
