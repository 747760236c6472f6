import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from selenium.common.exceptions import WebDriverException

from .errors import ControlNotFound, ElementNotFound
from .selectors import CLEAR_CONTROL_STRATEGIES, STRATEGIES, FieldRole, SelectorStrategy


@dataclass
class Resolution:
    strategy: SelectorStrategy
    element: Any


class ElementResolver:
    """Locates the translator's fields through ordered selector fallbacks.

    Strategies are tried strictly in priority order and the first one matching
    anything wins, even if a later strategy would have matched a better element.
    """

    def __init__(self, browser, timeouts: Optional[Dict[FieldRole, float]] = None,
                 strategies: Optional[Dict[FieldRole, Sequence[SelectorStrategy]]] = None):
        self.browser = browser
        self.timeouts = {FieldRole.INPUT: 30, FieldRole.OUTPUT: 10}
        if timeouts:
            self.timeouts.update(timeouts)
        self.strategies = dict(STRATEGIES)
        if strategies:
            self.strategies.update(strategies)
        self.logger = logging.getLogger(__name__)

    def resolve(self, role: FieldRole):
        return self.locate(role).element

    def locate(self, role: FieldRole, timeout: Optional[float] = None) -> Resolution:
        strategies = self.strategies[role]
        match = self._first_match(strategies)
        if match is None:
            raise ElementNotFound(role.value, [s.name for s in strategies])
        strategy, element = match
        if timeout is None:
            timeout = strategy.timeout if strategy.timeout is not None else self.timeouts[role]
        try:
            self.browser.wait_visible(element, timeout)
        except WebDriverException as e:
            self.logger.warning(f"{role.value} element from '{strategy.name}' not visible after {timeout}s: {e}")
            raise ElementNotFound(role.value, [strategy.name]) from e
        self.logger.debug(f"Located {role.value} field by {strategy.name}: {strategy.value}")
        return Resolution(strategy, element)

    def resolve_clear_control(self):
        match = self._first_match(CLEAR_CONTROL_STRATEGIES)
        if match is None:
            raise ControlNotFound()
        strategy, element = match
        self.logger.debug(f"Located clear control by {strategy.name}")
        return element

    def _first_match(self, strategies: Sequence[SelectorStrategy]):
        for strategy in strategies:
            try:
                elements = self.browser.find_elements(strategy.by, strategy.value)
            except WebDriverException as e:
                self.logger.info(f"Failed to query {strategy.name}: {e}")
                continue
            if elements:
                return strategy, elements[0]
        return None
