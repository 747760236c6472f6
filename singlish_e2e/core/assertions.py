import re
from typing import Optional

from ..models.test_case import ExpectedBehavior

# Sinhala block plus whitespace and basic punctuation
SINHALA_ONLY = re.compile(r'^[\u0D80-\u0DFF\s.,!?]*$')
LENGTH_LIMIT = 100


def _shorten(text: str, limit: int = 80) -> str:
    return text if len(text) <= limit else text[:limit] + '...'


def expected_description(behavior: ExpectedBehavior, input_text: str) -> str:
    descriptions = {
        ExpectedBehavior.EXPECT_EMPTY: 'empty output',
        ExpectedBehavior.EXPECT_ECHO: f'output equal to input {_shorten(input_text)!r}',
        ExpectedBehavior.EXPECT_NO_SQL_ARTIFACT: "output without 'DROP'",
        ExpectedBehavior.EXPECT_NO_SCRIPT_ARTIFACT: "output without '<script>'",
        ExpectedBehavior.EXPECT_NO_HTML_ARTIFACT: "output without '<b>'",
        ExpectedBehavior.EXPECT_LENGTH_BOUNDED: f'output shorter than {LENGTH_LIMIT} characters',
        ExpectedBehavior.EXPECT_SCRIPT_PURITY: 'output in Sinhala script and basic punctuation only',
        ExpectedBehavior.EXPECT_NON_EMPTY: 'non-empty output',
        ExpectedBehavior.EXPECT_CLEARED: 'empty input after clear',
    }
    return descriptions[behavior]


def check(behavior: ExpectedBehavior, input_text: str, output: str) -> Optional[str]:
    """Return None when output satisfies behavior, else a failure message."""
    if behavior == ExpectedBehavior.EXPECT_EMPTY:
        ok = output == ''
    elif behavior == ExpectedBehavior.EXPECT_ECHO:
        ok = output == input_text
    elif behavior == ExpectedBehavior.EXPECT_NO_SQL_ARTIFACT:
        ok = 'DROP' not in output
    elif behavior == ExpectedBehavior.EXPECT_NO_SCRIPT_ARTIFACT:
        ok = '<script>' not in output
    elif behavior == ExpectedBehavior.EXPECT_NO_HTML_ARTIFACT:
        ok = '<b>' not in output
    elif behavior == ExpectedBehavior.EXPECT_LENGTH_BOUNDED:
        ok = len(output) < LENGTH_LIMIT
    elif behavior == ExpectedBehavior.EXPECT_SCRIPT_PURITY:
        ok = SINHALA_ONLY.match(output) is not None
    elif behavior == ExpectedBehavior.EXPECT_NON_EMPTY:
        ok = len(output) > 0
    else:
        raise ValueError(f"No output assertion for {behavior.value}")
    if ok:
        return None
    return f"expected {expected_description(behavior, input_text)}, observed {_shorten(output)!r}"


def check_round_trip(input_text: str, actual_input: str) -> Optional[str]:
    if actual_input == input_text:
        return None
    return f"input field holds {_shorten(actual_input)!r}, expected {_shorten(input_text)!r}"
