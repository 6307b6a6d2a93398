"""
Interactive prompts.

InputPrompter is the only place that reads user input. Each prompt keeps
asking until the answer passes its validator, then returns ``Ok(value)``;
typing the cancel token returns ``Cancelled()`` instead.
"""

from datetime import date
from typing import Callable, Optional

from ..config import CMD_CANCEL, MSG_CONFIRM
from ..exceptions import InputClosedError
from ..models import Ok, Cancelled, PromptResult
from .validation import (
    validate_safe_text,
    validate_name,
    validate_student_id,
    validate_web_page,
    validate_positive_int,
    validate_date,
    parse_letter_grade,
    parse_confirmation,
)


class InputPrompter:
    """
    Retry-until-valid prompts over an injectable input source.

    Usage:
        prompter = InputPrompter()
        result = prompter.name("First Name:")
        if isinstance(result, Cancelled):
            ...
        first_name = result.value

    For tests, pass an ``input_func`` that returns scripted lines and raises
    EOFError when they run out.
    """

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 today_func: Callable[[], date] = date.today):
        self._input = input_func
        self._output = output_func
        self._today = today_func

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError as e:
            raise InputClosedError("Input stream closed while waiting for an answer") from e

    def ask(self, prompt: str, validator: Callable) -> PromptResult:
        """Ask until ``validator`` accepts the answer or the user cancels."""
        while True:
            raw = self._read(f"{prompt} ").strip()
            if raw.lower() == CMD_CANCEL:
                return Cancelled()

            result = validator(raw)
            if isinstance(result, Ok):
                return result
            self._output(result.reason)

    def text(self, prompt: str) -> PromptResult:
        return self.ask(prompt, validate_safe_text)

    def name(self, prompt: str) -> PromptResult:
        return self.ask(prompt, validate_name)

    def student_id(self, prompt: str) -> PromptResult:
        return self.ask(prompt, validate_student_id)

    def web_page(self, prompt: str) -> PromptResult:
        return self.ask(prompt, validate_web_page)

    def positive_int(self, prompt: str) -> PromptResult:
        return self.ask(prompt, validate_positive_int)

    def date(self, prompt: str) -> PromptResult:
        return self.ask(prompt, lambda raw: validate_date(raw, today=self._today()))

    def grade(self, course_name: str) -> PromptResult:
        self._output(f"Enter the course grade for {course_name} ('cancel' to skip):")
        return self.ask(">> Grade (AA, BA...):", parse_letter_grade)

    def confirm(self, prompt: Optional[str] = None) -> bool:
        """Ask a y/n question until one of the accepted answers is given."""
        prompt = prompt or MSG_CONFIRM
        while True:
            result = parse_confirmation(self._read(prompt))
            if isinstance(result, Ok):
                return result.value
            self._output(result.reason)
