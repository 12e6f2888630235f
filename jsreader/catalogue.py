from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from . import signatures as sig
from .filters import ScanSession
from .findings import Category, Finding

FIREBASE_NOTE = "Firebase service - check security rules"


@dataclass(frozen=True)
class Candidate:
    category: Category
    value: str
    rationale: str = ""


Extractor = Callable[["Rule", re.Match], Optional[Candidate]]


@dataclass(frozen=True)
class Rule:
    """One named detection rule.

    A rule runs ``pattern`` over the content.  Plain rules report capture
    group ``group`` under ``category`` with the fixed ``rationale``; rules that
    need context (object literals, call sites) supply ``extract`` instead,
    which may also return None to drop a match.
    """

    name: str
    category: Category
    pattern: re.Pattern
    rationale: str = ""
    group: int | str = 0
    extract: Optional[Extractor] = None

    def candidates(self, content: str) -> Iterator[Candidate]:
        for m in self.pattern.finditer(content):
            if self.extract is not None:
                c = self.extract(self, m)
            else:
                c = Candidate(self.category, m.group(self.group), self.rationale)
            if c is not None and c.value:
                yield c


def _version_from_path(rule: Rule, m: re.Match) -> Candidate:
    return Candidate(rule.category, "v" + m.group(1), rule.rationale)


def _network_call(rule: Rule, m: re.Match) -> Optional[Candidate]:
    call, url = m.group("call"), m.group("url")
    if sig.API_MARKER.search(url):
        return Candidate(Category.API_ENDPOINT, url, f"API endpoint found in {call} call")
    if url.startswith("http"):
        return Candidate(Category.URL_IN_VARIABLE, url, f"URL found in {call} call")
    return None


class ObjectLiteralRule(Rule):
    """Reports every URL or root-relative path declared inside an API map."""

    def candidates(self, content: str) -> Iterator[Candidate]:
        for obj in self.pattern.finditer(content):
            for key, value in sig.OBJECT_PAIR.findall(obj.group(2)):
                if value.startswith("http"):
                    yield Candidate(self.category, value, f"API endpoint found in object definition - {key}")
                elif value.startswith("/"):
                    yield Candidate(self.category, value, f"API path found in object definition - {key}")


# Declared order is evaluation order.  When two rules find the same value the
# earlier rule wins: its category and rationale are the ones reported.
RULES: List[Rule] = [
    Rule("s3-bucket", Category.S3_BUCKET, sig.S3_BUCKET,
         "Potential public S3 bucket - check permissions"),
    Rule("firebase-db", Category.FIREBASE_URL, sig.FIREBASE_DB, FIREBASE_NOTE),
    Rule("firebase-storage", Category.FIREBASE_STORAGE, sig.FIREBASE_STORAGE, FIREBASE_NOTE),
    Rule("firebase-app", Category.FIREBASE_API, sig.FIREBASE_APP, FIREBASE_NOTE),
    Rule("api-endpoint", Category.API_ENDPOINT, sig.API_ENDPOINT,
         "API endpoint - investigate available methods"),
    Rule("graphql", Category.GRAPHQL, sig.GRAPHQL),
    Rule("auth-endpoint", Category.AUTH_ENDPOINT, sig.AUTH_ENDPOINT,
         "Authentication endpoint - check for vulnerabilities"),
    Rule("telegram-token-context", Category.TELEGRAM_TOKEN, sig.TELEGRAM_TOKEN_IN_CONTEXT,
         "Telegram Bot API token in a variable context - high confidence match", group=1),
    Rule("telegram-token", Category.TELEGRAM_TOKEN, sig.TELEGRAM_TOKEN,
         "Telegram Bot API token - check if it's exposed"),
    Rule("api-version", Category.API_VERSION, sig.VERSION_LITERAL,
         "API version identifier - may indicate available API versions", group=1),
    Rule("api-version-path", Category.API_VERSION, sig.VERSION_IN_URL_PATH,
         "API version from URL path - investigate other available versions", extract=_version_from_path),
    Rule("api-version-comment", Category.API_VERSION, sig.VERSION_IN_COMMENT,
         "API version mentioned in code comment", group=1),
    Rule("api-subdomain", Category.API_SUBDOMAIN, sig.API_SUBDOMAIN,
         "Dedicated API subdomain - investigate available endpoints"),
    Rule("api-component", Category.API_COMPONENT, sig.QUOTED_API_PATH,
         "API path component - may indicate service structure", group=1),
    ObjectLiteralRule("api-object", Category.API_COMPONENT, sig.API_OBJECT),
    *[
        Rule(f"url-variable-{i}", Category.URL_IN_VARIABLE, p,
             "Found in JavaScript variable - may contain sensitive API URLs", group="url")
        for i, p in enumerate(sig.VARIABLE_ASSIGNMENTS, 1)
    ],
    *[
        Rule(f"api-call-{i}", Category.API_ENDPOINT, p, extract=_network_call)
        for i, p in enumerate(sig.NETWORK_CALLS, 1)
    ],
]


def iter_findings(content: str, source: str = "", session: ScanSession | None = None,
                  rules: List[Rule] | None = None) -> Iterator[Finding]:
    """Yield de-duplicated, noise-filtered findings for one reference.

    ``session`` must belong to this reference alone; a fresh one is created
    when omitted.
    """
    session = session if session is not None else ScanSession()
    for rule in RULES if rules is None else rules:
        for c in rule.candidates(content):
            if session.admit(c.category, c.value):
                yield Finding(category=c.category, value=c.value, source=source, rationale=c.rationale)


def scan_content(content: str, source: str = "", dedup_scope: str = "value") -> list[Finding]:
    return list(iter_findings(content, source, ScanSession(dedup_scope)))
