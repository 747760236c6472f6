import logging
import time
from enum import Enum
from typing import Iterable, List, Optional

from selenium.common.exceptions import WebDriverException

from ..config.settings import Config
from ..models.test_case import ExecutionResult, Outcome, Role, TestCase
from .assertions import check, check_round_trip, expected_description
from .errors import HarnessError
from .resolver import ElementResolver
from .selectors import FieldRole
from .settle import TranslationSettlePoller


class UICaseState(str, Enum):
    FILLED = 'filled'
    READ = 'read'
    CLEARED = 'cleared'


def _preview(text: str, limit: int = 50) -> str:
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"


def _message(error: Exception) -> str:
    if isinstance(error, WebDriverException) and error.msg:
        return error.msg
    return str(error) or type(error).__name__


class TestExecutionEngine:
    """Drives one translator page through the data-driven test cases.

    Cases run one at a time against a single browser session. The caller is
    expected to navigate freshly before each case; run_all does so.
    """

    __test__ = False

    def __init__(self, browser, config=Config, resolver: Optional[ElementResolver] = None,
                 poller: Optional[TranslationSettlePoller] = None, sleep=time.sleep):
        self.browser = browser
        self.config = config
        self.resolver = resolver or ElementResolver(
            browser,
            timeouts={FieldRole.INPUT: config.INPUT_TIMEOUT, FieldRole.OUTPUT: config.OUTPUT_TIMEOUT},
        )
        self.poller = poller or TranslationSettlePoller(
            browser, self.resolver,
            debounce_wait=config.DEBOUNCE_WAIT,
            interval=config.SETTLE_INTERVAL,
            retry_wait=config.RETRY_WAIT,
            sleep=sleep,
        )
        self._sleep = sleep
        self.logger = logging.getLogger(__name__)

    def run_all(self, cases: Iterable[TestCase], url: Optional[str] = None) -> List[ExecutionResult]:
        url = url or self.config.TARGET_URL
        results = []
        for case in cases:
            try:
                self.browser.navigate(url)
            except Exception as e:
                self.logger.error(f"[{case.id}] Navigation to {url} failed: {e}")
                results.append(self._error_result(case, f"navigation failed: {_message(e)}", time.time()))
                continue
            results.append(self.run_case(case))
        return results

    def run_case(self, case: TestCase) -> ExecutionResult:
        start = time.time()
        try:
            if case.role == Role.UI:
                result = self.execute_ui_case(case)
            else:
                result = self.execute(case)
        except HarnessError as e:
            self.logger.error(f"ERROR: {case.id}: {e}")
            return self._error_result(case, str(e), start)
        except Exception as e:
            self.logger.error(f"ERROR: {case.id}: browser error: {_message(e)}")
            return self._error_result(case, f"browser error: {_message(e)}", start)
        self._log_result(result)
        return result

    def execute(self, case: TestCase) -> ExecutionResult:
        start = time.time()
        self.logger.info(f"[{case.id}] {case.description}")
        self.logger.info(f"Input: \"{_preview(case.input_text)}\"")

        input_field = self.resolver.resolve(FieldRole.INPUT)
        self.browser.set_value(input_field, case.input_text)

        output = self.poller.settle()
        self.logger.info(f"Output: \"{_preview(output)}\"")

        actual_input = self.browser.get_value(input_field)
        reason = check_round_trip(case.input_text, actual_input)
        if reason is None:
            reason = check(case.expected_behavior, case.input_text, output)
        return self._result(case, output, reason, start)

    def execute_ui_case(self, case: TestCase) -> ExecutionResult:
        start = time.time()
        self.logger.info(f"[{case.id}] {case.description}")

        input_field = self.resolver.resolve(FieldRole.INPUT)
        self.browser.set_value(input_field, case.input_text)
        state = UICaseState.FILLED
        self._sleep(self.config.FILL_WAIT)

        current = self.browser.get_value(input_field)
        reason = check_round_trip(case.input_text, current)
        if reason is not None:
            return self._result(case, '', f"{state.value}: {reason}", start)
        state = UICaseState.READ
        self.logger.info(f"Step 1: Input entered: \"{current}\"")

        output = self.poller.read_output()
        self.logger.info(f"Step 2: Output generated: \"{_preview(output)}\"")

        control = self.resolver.resolve_clear_control()
        self.browser.click(control)
        self._sleep(self.config.CLEAR_WAIT)

        current = self.browser.get_value(input_field)
        if current != '':
            reason = f"{state.value}: input field holds {_preview(current)!r} after clear, expected ''"
            return self._result(case, output, reason, start)
        state = UICaseState.CLEARED
        self.logger.info(f"Step 3: Input {state.value} via delete button successfully")
        return self._result(case, output, None, start)

    def _result(self, case: TestCase, output: str, reason: Optional[str], start: float) -> ExecutionResult:
        if reason is None:
            outcome = Outcome.PASSED
        elif case.role == Role.NEGATIVE:
            outcome = Outcome.EXPECTED_FAILURE
        else:
            outcome = Outcome.FAILED
        return ExecutionResult(
            test_case_id=case.id,
            role=case.role,
            observed_output=output,
            passed=reason is None,
            outcome=outcome,
            failure_reason=reason,
            expected=expected_description(case.expected_behavior, case.input_text),
            description=case.description,
            input_text=case.input_text,
            duration=round(time.time() - start, 2),
        )

    def _error_result(self, case: TestCase, reason: str, start: float) -> ExecutionResult:
        return ExecutionResult(
            test_case_id=case.id,
            role=case.role,
            passed=False,
            outcome=Outcome.ERROR,
            failure_reason=reason,
            expected=expected_description(case.expected_behavior, case.input_text),
            description=case.description,
            input_text=case.input_text,
            duration=round(time.time() - start, 2),
        )

    def _log_result(self, result: ExecutionResult) -> None:
        if result.outcome == Outcome.PASSED:
            self.logger.info(f"PASSED: {result.test_case_id}")
        elif result.outcome == Outcome.EXPECTED_FAILURE:
            self.logger.info(f"EXPECTED FAILURE: {result.test_case_id}: {result.failure_reason}")
        else:
            self.logger.error(f"FAILED: {result.test_case_id}: {result.failure_reason}")
