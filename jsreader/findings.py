from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    S3_BUCKET = "S3 Bucket"
    FIREBASE_URL = "Firebase URL"
    FIREBASE_STORAGE = "Firebase Storage"
    FIREBASE_API = "Firebase API"
    API_ENDPOINT = "API Endpoint"
    GRAPHQL = "GraphQL"
    AUTH_ENDPOINT = "Auth Endpoint"
    TELEGRAM_TOKEN = "Telegram Token"
    API_VERSION = "API Version"
    API_SUBDOMAIN = "API Subdomain"
    API_COMPONENT = "API Component"
    URL_IN_VARIABLE = "URL in variable"

    def __str__(self) -> str:
        return self.value


# Short labels printed in front of each finding.
TAGS: dict[Category, str] = {
    Category.S3_BUCKET: "S3 Bucket",
    Category.FIREBASE_URL: "Firebase DB",
    Category.FIREBASE_STORAGE: "Firebase Storage",
    Category.FIREBASE_API: "Firebase API",
    Category.API_ENDPOINT: "API",
    Category.GRAPHQL: "GraphQL",
    Category.AUTH_ENDPOINT: "Auth",
    Category.URL_IN_VARIABLE: "JS Variable",
    Category.TELEGRAM_TOKEN: "Telegram Bot",
    Category.API_SUBDOMAIN: "API Subdomain",
    Category.API_VERSION: "API Version",
    Category.API_COMPONENT: "API Component",
}


@dataclass(frozen=True)
class Finding:
    category: Category
    value: str
    source: str = ""
    rationale: str = ""

    @property
    def tag(self) -> str:
        return TAGS.get(self.category, str(self.category))
