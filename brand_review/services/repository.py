from __future__ import annotations
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlparse

import aiohttp
from pydantic import ValidationError

from brand_review.core.config import RULES_FETCH_TIMEOUT
from brand_review.core.errors import NotLoadedError, RuleLoadError
from brand_review.models.report import Evaluation
from brand_review.models.rules import RuleSet
from brand_review.services.rules import evaluate

log = logging.getLogger("rules")

RuleSource = Union[RuleSet, Mapping[str, Any], str, os.PathLike]


def _is_url(source: Any) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in ("http", "https")


def _parse(data: Any) -> RuleSet:
    if isinstance(data, RuleSet):
        return data
    if not isinstance(data, Mapping):
        raise RuleLoadError(f"Rule set must be an object, got {type(data).__name__}")
    try:
        return RuleSet.model_validate(data)
    except ValidationError as e:
        raise RuleLoadError(f"Malformed rule set: {e.error_count()} validation error(s)") from e


def _read_file(path: Union[str, os.PathLike]) -> Any:
    try:
        with Path(path).open("r", encoding="utf-8") as fp:
            return json.load(fp)
    except OSError as e:
        raise RuleLoadError(f"Cannot read rule file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RuleLoadError(f"Rule file {path} is not valid JSON: {e}") from e


async def _fetch(url: str) -> Any:
    timeout = aiohttp.ClientTimeout(total=RULES_FETCH_TIMEOUT)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as resp:
                if resp.status != 200:
                    raise RuleLoadError(f"Failed to load rules: HTTP {resp.status} {resp.reason}")
                body = await resp.text()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise RuleLoadError(f"Failed to load rules from {url}: {e}") from e
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise RuleLoadError(f"Rules at {url} are not valid JSON: {e}") from e


class RuleRepository:
    """Holds the active rule set. A failed load keeps the previous one."""

    def __init__(self, rule_set: Optional[RuleSet] = None):
        self._rules = rule_set

    @property
    def ready(self) -> bool:
        return self._rules is not None

    @property
    def rules(self) -> RuleSet:
        if self._rules is None:
            raise NotLoadedError("Rules not loaded. Call load() first.")
        return self._rules

    @property
    def version(self) -> Optional[str]:
        return self._rules.version if self._rules is not None else None

    def _install(self, rule_set: RuleSet) -> RuleSet:
        self._rules = rule_set
        log.info("Rules loaded successfully: version=%s, %d rules", rule_set.version, rule_set.rule_count())
        return rule_set

    def load(self, source: RuleSource) -> RuleSet:
        """Load from a rule-set object, a mapping, or a JSON file path."""
        if _is_url(source):
            raise RuleLoadError("URL sources must be loaded with aload()")
        try:
            data = _read_file(source) if isinstance(source, (str, os.PathLike)) else source
            rule_set = _parse(data)
        except RuleLoadError:
            log.error("Error loading rules from %r", source if not isinstance(source, Mapping) else "<mapping>")
            raise
        return self._install(rule_set)

    async def aload(self, source: RuleSource) -> RuleSet:
        """Like load(), but also accepts http(s) URLs."""
        if not _is_url(source):
            return self.load(source)
        try:
            rule_set = _parse(await _fetch(source))
        except RuleLoadError:
            log.error("Error loading rules from %s", source)
            raise
        return self._install(rule_set)

    def evaluate(
        self,
        text: str,
        business_unit: str,
        country: str,
        asset_type: str,
        content_type: str,
    ) -> Evaluation:
        return evaluate(self.rules, text, business_unit, country, asset_type, content_type)
