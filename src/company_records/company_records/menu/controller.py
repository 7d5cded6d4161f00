from __future__ import annotations

import re
from functools import wraps
from typing import Callable, Dict, Sequence

from ..container import Container
from ..core.exceptions import DomainError, NotFoundError, StorageError, ValidationError
from ..departments.model import Department
from ..employees.model import Employee

BLACK_FONT = "\033[30m"
RED_FONT = "\033[31m"
GREEN_FONT = "\033[32m"
YELLOW_FONT = "\033[33m"
WHITE_BG = "\033[47m"
CYAN_BG = "\033[46m"
RESET = "\033[0m"

_OPTION_RE = re.compile(r"[0-9]{1,2}")

MENU_OPTIONS = (
    "Select an option:"
    "\n\t1) List all Employees"
    "\n\t2) Find Employee by its ID"
    "\n\t3) Add new Employee"
    "\n\t4) Update Employee"
    "\n\t5) Delete Employee"
    "\n\t6) List all Departments"
    "\n\t7) Find Department by its ID"
    "\n\t8) Add new Department"
    "\n\t9) Update Department"
    "\n\t10) Delete Department"
    "\n\t11) Find Employees by Department"
    "\n\t0) Exit program"
)


def _table(headers: Sequence[str], widths: Sequence[int], rows: Sequence[Sequence[object]]) -> str:
    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def fmt(values: Sequence[object]) -> str:
        return "| " + " | ".join(f"{str(v):<{w}}" for v, w in zip(values, widths)) + " |"

    out = [border, fmt(headers), border]
    out.extend(fmt(r) for r in rows)
    out.append(border)
    return "\n".join(out)


def employees_table(employees: Sequence[Employee]) -> str:
    return _table(
        ("EMPNO", "NAME", "POSITION", "DEPNO"),
        (5, 14, 14, 5),
        [(e.empno, e.name, e.position, e.depno) for e in employees],
    )


def departments_table(departments: Sequence[Department]) -> str:
    return _table(
        ("DEPNO", "NAME", "LOCATION"),
        (5, 18, 14),
        [(d.depno, d.name, d.location) for d in departments],
    )


def department_staff_table(employees: Sequence[Employee]) -> str:
    return _table(
        ("EMPNO", "NAME", "POSITION"),
        (5, 14, 14),
        [(e.empno, e.name, e.position) for e in employees],
    )


class _EndOfInput(Exception):
    pass


def requires_data_file(action):
    @wraps(action)
    def wrapper(self: "MenuController", *args, **kwargs):
        if not self.file_ready:
            self.error("The data file does not exist. Create it first (scripts/init_data.py).")
            return None
        return action(self, *args, **kwargs)

    return wrapper


class MenuController:
    """Interactive terminal menu over the employee/department services.

    Note: Input and output are injected so the loop can be driven from tests.
    """

    def __init__(
        self,
        container: Container,
        *,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        color: bool = True,
    ):
        self._container = container
        self._input = input_fn
        self._output = output
        self._color = color
        self._running = False
        self.file_ready = False

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.list_employees,
            2: self.find_employee,
            3: self.add_employee,
            4: self.update_employee,
            5: self.delete_employee,
            6: self.list_departments,
            7: self.find_department,
            8: self.add_department,
            9: self.update_department,
            10: self.delete_department,
            11: self.list_department_employees,
        }

    # Output helpers
    def _paint(self, text: str, *codes: str) -> str:
        if not self._color:
            return text
        return "".join(codes) + text + RESET

    def say(self, text: str) -> None:
        self._output(text)

    def success(self, text: str) -> None:
        self._output(self._paint(text, GREEN_FONT))

    def warn(self, text: str) -> None:
        self._output(self._paint(text, YELLOW_FONT))

    def error(self, text: str) -> None:
        self._output(self._paint(f"ERROR: {text}", RED_FONT))

    def ask(self, prompt: str) -> str:
        self._output(prompt)
        try:
            return self._input(self._paint(">", BLACK_FONT, WHITE_BG) + " ")
        except EOFError:
            raise _EndOfInput()

    # Main loop
    def run(self) -> None:
        self._running = True
        self.file_ready = self._container.file_exists()
        if not self.file_ready:
            self.error(f"Data file {self._container.store.path} not found.")

        try:
            while self._running:
                self._output(self._paint("- WELCOME TO THE COMPANY -", CYAN_BG, BLACK_FONT))
                self._output(MENU_OPTIONS)
                try:
                    self.dispatch(self.ask("Option:").strip())
                except _EndOfInput:
                    self._running = False
        finally:
            self._container.close()
            self.success("- Data file closed -")
        self._output(self._paint("- SEE YOU SOON -", CYAN_BG, BLACK_FONT))

    def dispatch(self, option: str) -> None:
        if not option:
            self.error("Please indicate the option number")
            return
        if not _OPTION_RE.fullmatch(option):
            self.error("Please provide a valid input for option! The input must be an Integer value")
            return

        choice = int(option)
        if choice == 0:
            self._running = False
            return
        action = self._actions.get(choice)
        if action is None:
            self.error("Please provide a valid option")
            return

        try:
            action()
        except NotFoundError as e:
            self.warn(str(e))
        except ValidationError as e:
            self.error(str(e))
        except StorageError as e:
            self.error(f"Could not update the data file: {e}")
        except DomainError as e:
            self.error(str(e))

    # Employees
    @requires_data_file
    def list_employees(self) -> None:
        employees = self._container.employee_service.list_employees()
        if not employees:
            self.say("There are currently no Employees stored")
            return
        self.say(employees_table(employees))

    @requires_data_file
    def find_employee(self) -> None:
        employee = self._container.employee_service.get_employee(self.ask("Insert Employee's ID:"))
        self.say("Employee's information:")
        self.say(employees_table([employee]))

    @requires_data_file
    def add_employee(self) -> None:
        svc = self._container.employee_service
        empno = self.ask("Insert new Employee's ID:")
        # Fail early on a taken ID instead of after all the prompts
        if svc.find_employee(empno):
            raise ValidationError("There is already an Employee with the same ID")
        name = self.ask("Insert new Employee's NAME:")
        position = self.ask("Insert new Employee's POSITION:")
        depno = self.ask("Insert new Employee's DEPNO:")

        svc.hire(empno=empno, name=name, position=position, depno=depno)
        self.success("New Employee added successfully!")

    @requires_data_file
    def update_employee(self) -> None:
        svc = self._container.employee_service
        current = svc.get_employee(self.ask("Insert Employee's ID:"))
        name = self.ask(f"Name (current: {current.name}):")
        position = self.ask(f"Position (current: {current.position}):")
        depno = self.ask(f"Department ID (current: {current.depno}):")

        updated = svc.change(empno=current.empno, name=name, position=position, depno=depno)
        self.success("Employee updated successfully!")
        self.say(employees_table([updated]))

    @requires_data_file
    def delete_employee(self) -> None:
        removed = self._container.employee_service.dismiss(self.ask("Insert Employee's ID:"))
        self.success(f"Employee {removed.empno} ({removed.name}) deleted.")

    # Departments
    @requires_data_file
    def list_departments(self) -> None:
        departments = self._container.department_service.list_departments()
        if not departments:
            self.say("There are currently no Departments stored")
            return
        self.say(departments_table(departments))

    @requires_data_file
    def find_department(self) -> None:
        department = self._container.department_service.get_department(self.ask("Insert Department's ID:"))
        self.say("Department's information:")
        self.say(departments_table([department]))

    @requires_data_file
    def add_department(self) -> None:
        svc = self._container.department_service
        depno = self.ask("Insert new Department's ID:")
        if svc.find_department(depno):
            raise ValidationError("There is already a Department with the same ID")
        name = self.ask("Insert new Department's NAME:")
        location = self.ask("Insert new Department's LOCATION:")

        svc.open(depno=depno, name=name, location=location)
        self.success("New Department added successfully!")

    @requires_data_file
    def update_department(self) -> None:
        svc = self._container.department_service
        current = svc.get_department(self.ask("Insert Department's ID:"))
        name = self.ask(f"Name (current: {current.name}):")
        location = self.ask(f"Location (current: {current.location}):")

        updated = svc.change(depno=current.depno, name=name, location=location)
        self.success("Department updated successfully!")
        self.say(departments_table([updated]))

    @requires_data_file
    def delete_department(self) -> None:
        removed = self._container.department_service.close_department(self.ask("Insert Department's ID:"))
        self.success(f"Department {removed.depno} ({removed.name}) deleted.")

    @requires_data_file
    def list_department_employees(self) -> None:
        department = self._container.department_service.get_department(self.ask("Insert Department's ID:"))
        employees = self._container.employee_service.list_for_department(department.depno)
        if not employees:
            self.say(f"There are no Employees in Department {department.depno} ({department.name})")
            return
        self.say(f"Employees in {department.name} ({department.location}):")
        self.say(department_staff_table(employees))

