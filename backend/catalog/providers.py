"""
Registry of provider shorthand rules.

Catalog authors sometimes write a provider code and an id instead of a
link, e.g. ``G1 (4J9UvBsaBI)``. Each rule maps a provider code pattern
to a builder that turns the id into a watch URL.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator

TOKEN_PATTERN = re.compile(r"([A-Za-z0-9_-]+)\s*\(\s*([A-Za-z0-9_-]+)\s*\)")

UrlBuilder = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class ProviderRule:
    """A provider code pattern and the builder applied to matching ids."""

    pattern: re.Pattern[str]
    builder: UrlBuilder

    def build(self, code: str, token_id: str) -> str | None:
        if self.pattern.fullmatch(code):
            return self.builder(token_id)
        return None


class ProviderRegistry:
    """Ordered collection of provider rules."""

    def __init__(self) -> None:
        self._rules: list[ProviderRule] = []

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[ProviderRule]:
        return iter(self._rules)

    def add(self, pattern: str, builder: UrlBuilder) -> None:
        """Append a rule; codes are matched case-insensitively."""

        self._rules.append(ProviderRule(re.compile(pattern, re.IGNORECASE), builder))

    def register(self, pattern: str) -> Callable[[UrlBuilder], UrlBuilder]:
        """Decorator form of :meth:`add`."""

        def decorator(builder: UrlBuilder) -> UrlBuilder:
            self.add(pattern, builder)
            return builder

        return decorator

    def construct(self, text: str | None) -> str | None:
        """Build a URL from the first ``CODE (ID)`` token a rule accepts."""

        if not text:
            return None
        for match in TOKEN_PATTERN.finditer(text):
            code, token_id = match.group(1), match.group(2)
            for rule in self._rules:
                url = rule.build(code, token_id)
                if url:
                    return url
        return None


default_registry = ProviderRegistry()


@default_registry.register(r"G1")
def _short_icu(token_id: str) -> str:
    return f"https://short.icu/{token_id}"


@default_registry.register(r"Z1")
def _zoro(token_id: str) -> str:
    return f"https://zoro.rpmplay.xyz/{token_id}"
