from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from selenium.webdriver.common.by import By


class FieldRole(str, Enum):
    INPUT = 'input'
    OUTPUT = 'output'


@dataclass(frozen=True)
class SelectorStrategy:
    name: str
    value: str
    by: str = By.CSS_SELECTOR
    # 'value' reads the form field value, 'text' reads rendered text content
    read_mode: str = 'value'
    timeout: Optional[float] = None


INPUT_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy(
        'input_placeholder',
        'textarea[placeholder*="Singlish"], textarea[placeholder*="singlish"], textarea[placeholder*="English"]',
    ),
    SelectorStrategy('first_textarea', 'textarea:first-of-type'),
    SelectorStrategy('any_textarea', 'textarea'),
    SelectorStrategy('text_input', 'input[type="text"]'),
)

OUTPUT_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy(
        'output_placeholder',
        'textarea[placeholder*="Sinhala"], textarea[placeholder*="sinhala"]',
    ),
    SelectorStrategy('last_textarea', 'textarea:last-of-type'),
    SelectorStrategy('second_textarea', 'textarea:nth-of-type(2)'),
    SelectorStrategy('output_class', '.output-text, .result-text, .translation-result'),
    # Generic display areas, read as text
    SelectorStrategy(
        'output_div',
        'div[class*="output"], div[class*="result"], div[class*="translation"]',
        read_mode='text', timeout=5,
    ),
    SelectorStrategy('output_block', '.output, .result', read_mode='text', timeout=5),
    SelectorStrategy('preformatted', 'pre', read_mode='text', timeout=5),
)

STRATEGIES = {
    FieldRole.INPUT: INPUT_STRATEGIES,
    FieldRole.OUTPUT: OUTPUT_STRATEGIES,
}


def _lowered(expression: str) -> str:
    return f"translate({expression}, 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')"


CLEAR_CONTROL_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy(
        'clear_button_text',
        f"//button[contains({_lowered('normalize-space(.)')}, 'delete') "
        f"or contains({_lowered('normalize-space(.)')}, 'clear')]",
        by=By.XPATH,
    ),
    SelectorStrategy(
        'clear_button_aria_label',
        f"//button[contains({_lowered('@aria-label')}, 'delete') "
        f"or contains({_lowered('@aria-label')}, 'clear')]",
        by=By.XPATH,
    ),
)
