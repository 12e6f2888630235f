"""Canonical patterns used by the matcher catalogue.

Patterns are grouped by what they look for.  They are compiled once here and
shared by the rules in :mod:`jsreader.catalogue`, so new indicators can be
appended without touching the rule plumbing.  Everything is plain text
matching; nothing here understands JavaScript syntax.
"""

import re

# --- Cloud storage ----------------------------------------------------------
S3_BUCKET = re.compile(r"https?://[a-zA-Z0-9.-]*\.?s3[.-][a-z0-9-]*\.amazonaws\.com[^\s\"']*")

FIREBASE_DB = re.compile(r"https?://[a-zA-Z0-9-]+\.firebaseio\.com[^\s\"']*")
FIREBASE_STORAGE = re.compile(r"https?://firebasestorage\.googleapis\.com[^\s\"']*")
FIREBASE_APP = re.compile(r"https?://[a-zA-Z0-9-]+\.firebaseapp\.com[^\s\"']*")

# --- Backend URLs -----------------------------------------------------------
API_ENDPOINT = re.compile(r"https?://[a-zA-Z0-9.-]+/(?:v[0-9]+/|api/)[a-zA-Z0-9./_-]*")
GRAPHQL = re.compile(r"https?://[a-zA-Z0-9.-]+/(?:graphql|gql)[^\s\"']*")
AUTH_ENDPOINT = re.compile(r"https?://[a-zA-Z0-9.-]+/(?:auth|oauth|token|login|register|user|admin)[^\s\"']*")
API_SUBDOMAIN = re.compile(r"https?://(?:api|api-[a-zA-Z0-9]+)\.(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}[^\s\"']*")

# --- Tokens -----------------------------------------------------------------
TELEGRAM_TOKEN = re.compile(r"[0-9]{8,10}:[a-zA-Z0-9_-]{35}")
# Group 1 is the token itself.
TELEGRAM_TOKEN_IN_CONTEXT = re.compile(
    r"(?:bot|token|api|key)\s*[=:]\s*[\"']([0-9]{8,10}:[a-zA-Z0-9_-]{35})[\"']"
)

# --- API versions -----------------------------------------------------------
# Group 1 is the version, e.g. "v2" or "v1.1".
VERSION_LITERAL = re.compile(r"[\"'](v[0-9]+(?:\.[0-9]+)?)[\"']")
# Group 1 is the number only; the first version segment of each URL wins.
VERSION_IN_URL_PATH = re.compile(r"https?://[^/\s\"']+/(?:[^\s\"'?#]*?/)?v([0-9]+(?:\.[0-9]+)?)/")
VERSION_IN_COMMENT = re.compile(r"//.*\b(v[0-9]+(?:\.[0-9]+)?)\b.*api")

# --- Path components --------------------------------------------------------
# Group 1 is the path without its quotes.
QUOTED_API_PATH = re.compile(r"[\"'](/(?:api|rest|v[0-9]+)/[a-zA-Z0-9/_-]+)[\"']")

# Group 1 is the object name, group 2 its body up to the first closing brace.
API_OBJECT = re.compile(r"\b(endpoints|api|routes)\s*:\s*\{([^}]*)\}")
# Key/value pairs inside an API_OBJECT body; the value must be quoted.
OBJECT_PAIR = re.compile(r"[\"']?([A-Za-z0-9_$.-]+)[\"']?\s*:\s*[\"']([^\"']+)[\"']")

# --- Assignments ------------------------------------------------------------
# Each entry captures the assigned string in the named group "url".
VARIABLE_ASSIGNMENTS = [
    re.compile(r"const\s+[a-zA-Z0-9_]+\s*=\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"let\s+[a-zA-Z0-9_]+\s*=\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"var\s+[a-zA-Z0-9_]+\s*=\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"[a-zA-Z0-9_]+\s*:\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"(?:url|endpoint|api|baseUrl|apiUrl|baseURL|apiURL)\s*[=:]\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"(?:url|endpoint|api|baseUrl|apiUrl|baseURL|apiURL)\s*[=:]\s*[\"'](?P<url>/[^\"'\s]+)[\"']"),
]

# --- Network calls ----------------------------------------------------------
# Named groups: "call" is the function or method name, "url" the first argument.
NETWORK_CALLS = [
    re.compile(r"(?P<call>fetch|axios\.get|axios\.post|ajax|request)\s*\(\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"\.(?P<call>get|post|put|delete|patch)\s*\(\s*[\"'](?P<url>https?://[^\"'\s]+)[\"']"),
    re.compile(r"\.(?P<call>get|post|put|delete|patch)\s*\(\s*[\"'](?P<url>/[^\"'\s]+)[\"']"),
]
# Markers that make a call argument an API endpoint rather than a plain URL.
API_MARKER = re.compile(r"/api/|/v[0-9]+/")
