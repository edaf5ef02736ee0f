# ==============================================
# Interaction Shell
# ==============================================
#
# PURPOSE:
#   Numbered menu that lets an operator view, modify, add and
#   remove employees. Every change goes through the injected
#   RecordStore, and the store is flushed through the gateway
#   after every menu action and once more on exit.
#
# RE-PROMPTING:
#   Invalid input is answered with a message and the same
#   question again, in a loop. A loop gives up after
#   max_attempts invalid answers (0 = never):
#   - inside an action → the action is abandoned, back to menu
#   - at the menu itself → the session ends
#   End of input ends the session as if "Exit" was chosen.
#
# ==============================================

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from .errors import (
    IdSpaceExhaustedError,
    NotFoundError,
    PromptAbortedError,
    ValidationError,
)
from .persistence import PersistenceGateway
from .store import (
    Employee,
    EmployeeFields,
    RecordStore,
    format_wage,
    parse_employee_id,
    parse_wage,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMAIL = re.compile(r"[^@\s,]+@[^@\s,]+")


@dataclass(frozen=True)
class MenuItem:
    text: str
    action: Callable[[], None]


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_employee(employee: Employee) -> str:
    """Format a single employee as a labeled block."""
    return "\n".join([
        "",
        "-" * 32,
        f"ID: {employee.id}",
        f"Name: {employee.full_name}",
        f"Email: {employee.email}",
        f"Hourly Wage: ${format_wage(employee.hourly_wage)}",
    ])


# =============================================================================
# INPUT PARSING
# =============================================================================

def parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError(f"not a whole number: {raw!r}") from None


def parse_text(raw: str) -> str:
    # The file format has no quoting, so a comma would split the field.
    if "," in raw:
        raise ValidationError("commas are not allowed")
    return raw.strip()


def parse_email(raw: str) -> str:
    value = raw.strip()
    if not _EMAIL.fullmatch(value):
        raise ValidationError(f"not an email address: {raw!r}")
    return value


class InteractionShell:
    """Menu loop over an injected RecordStore."""

    RULE = "-" * 40

    def __init__(
        self,
        store: RecordStore,
        gateway: PersistenceGateway,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        max_attempts: int = 10,
    ):
        self.store = store
        self.gateway = gateway
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.max_attempts = max_attempts
        self._wants_to_exit = False
        self.menu: List[MenuItem] = [
            MenuItem("1. View current employees", self.view_employees),
            MenuItem("2. Modify an employee", self.edit_employee),
            MenuItem("3. Add a new employee", self.add_employee),
            MenuItem("4. Remove an employee", self.remove_employee),
            MenuItem("5. Exit", self.exit),
        ]

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the operator exits, saving after each action."""
        self._wants_to_exit = False
        while not self._wants_to_exit:
            try:
                self.show_main_menu()
            except EOFError:
                logger.info("End of input, leaving the menu")
                self._wants_to_exit = True
            except PromptAbortedError as e:
                self.output_func(f"\n{e}")
                self._wants_to_exit = True
            self.gateway.save_store(self.store)
        self.gateway.save_store(self.store)

    def show_main_menu(self) -> None:
        """Show the menu and perform the selected action."""
        selection = self._ask(
            ">>> ",
            self._parse_menu_choice,
            "\nInput not valid. Please try again.",
            before=self._print_menu,
        )
        item = self.menu[selection - 1]
        try:
            item.action()
        except PromptAbortedError as e:
            logger.warning("Abandoned %r: %s", item.text, e)
            self.output_func(f"\n{e} Returning to the main menu.")

    def _print_menu(self) -> None:
        self.output_func(self.RULE)
        for item in self.menu:
            self.output_func(item.text)

    def _parse_menu_choice(self, raw: str) -> int:
        selection = parse_int(raw)
        if selection <= 0 or selection > len(self.menu):
            raise ValidationError(f"menu choice out of range: {selection}")
        return selection

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def view_employees(self) -> None:
        """Show every employee in store order."""
        for employee in self.store.all_records():
            self.output_func(format_employee(employee))

    def edit_employee(self) -> None:
        """Ask for an employee id and replace that employee's fields."""
        if not self._has_employees():
            return
        self.view_employees()
        employee = self._ask(
            "Employee ID: ",
            self._parse_existing_employee,
            "Employee ID not valid. Please try again.",
        )

        self.output_func(self.RULE)
        self.output_func(
            "Press enter to keep current value. "
            "Any new input will be changed in the employees file."
        )
        fields = self._ask_fields(current=employee.fields)
        self.store.update(employee.id, fields)
        self.view_employees()

    def add_employee(self) -> None:
        """Ask for a new employee's details and add them with a fresh id."""
        try:
            employee_id = self.store.allocate_id()
        except IdSpaceExhaustedError as e:
            self.output_func(f"Cannot add an employee: {e}.")
            return
        fields = self._ask_fields()
        self.store.add(fields, employee_id)
        self.output_func("\nNew employee has been added!")

    def remove_employee(self) -> None:
        """Ask for an employee id and remove that employee."""
        if not self._has_employees():
            return
        self.output_func(self.RULE)
        self.view_employees()
        employee = self._ask(
            "\nEmployee ID: ",
            self._parse_existing_employee,
            "Employee ID invalid. Please try again.",
        )
        self.store.remove(employee.id)

    def exit(self) -> None:
        self._wants_to_exit = True

    # -------------------------------------------------------------------------
    # Prompting
    # -------------------------------------------------------------------------

    def _has_employees(self) -> bool:
        if len(self.store) == 0:
            self.output_func("No employees on file.")
            return False
        return True

    def _parse_existing_employee(self, raw: str) -> Employee:
        return self.store.require(parse_employee_id(raw))

    def _ask_fields(self, current: Optional[EmployeeFields] = None) -> EmployeeFields:
        """
        Prompt for the four editable fields.

        With `current`, each prompt shows the current value and an
        empty answer keeps it.
        """
        def label(name: str, value: object) -> str:
            if current is None:
                return f"{name}: "
            return f"{name} ({value}): "

        return EmployeeFields(
            first_name=self._ask(
                label("First Name", current and current.first_name),
                parse_text,
                "Names cannot contain commas. Please try again.",
                default=current and current.first_name,
            ),
            last_name=self._ask(
                label("Last Name", current and current.last_name),
                parse_text,
                "Names cannot contain commas. Please try again.",
                default=current and current.last_name,
            ),
            email=self._ask(
                label("Email", current and current.email),
                parse_email,
                "Input valid email address, please.",
                default=current and current.email,
            ),
            hourly_wage=self._ask(
                label("Hourly Wage", current and current.hourly_wage),
                parse_wage,
                "Input a non-negative number, please.",
                default=current and current.hourly_wage,
            ),
        )

    def _ask(
        self,
        prompt: str,
        parse: Callable[[str], T],
        error_message: str,
        default: Optional[T] = None,
        before: Optional[Callable[[], None]] = None,
    ) -> T:
        """
        Ask until `parse` accepts the answer.

        An empty answer returns `default` when one is given.

        Raises:
            PromptAbortedError: after max_attempts rejected answers
            EOFError: if the input provider is exhausted
        """
        attempts = 0
        while True:
            if before is not None:
                before()
            raw = self.input_func(prompt)
            if default is not None and raw.strip() == "":
                return default
            try:
                return parse(raw)
            except (ValidationError, NotFoundError) as e:
                attempts += 1
                logger.debug("Rejected answer to %r: %s", prompt, e)
                self.output_func(error_message)
                if self.max_attempts and attempts >= self.max_attempts:
                    raise PromptAbortedError(
                        f"Too many invalid answers ({attempts})."
                    ) from e
