import pytest

from company_records.core.exceptions import InvalidKeyError, NotFoundError, StorageError
from company_records.employees.file_employee_repository import FileEmployeeRepository
from company_records.employees.model import Employee
from company_records.storage.file_store import FileStore


def test_list_all_in_file_order_skipping_bad_lines(employees):
    assert [e.empno for e in employees.list_all()] == [1, 2, 3]


def test_list_all_empty_when_no_employee_lines(empty_file):
    assert FileEmployeeRepository(FileStore(empty_file)).list_all() == []


def test_list_all_missing_file_is_empty(missing_file):
    assert FileEmployeeRepository(FileStore(missing_file)).list_all() == []


def test_get_by_id(employees):
    assert employees.get_by_id(2) == Employee(empno=2, name="JONES", position="MANAGER", depno=20)


def test_get_by_id_not_found(employees):
    assert employees.get_by_id(99) is None


@pytest.mark.parametrize("key", ["1", 1.0, None, True])
def test_get_by_id_invalid_key(employees, key):
    assert employees.get_by_id(key) is None


def test_get_by_id_missing_file(missing_file):
    assert FileEmployeeRepository(FileStore(missing_file)).get_by_id(1) is None


def test_add_appends_in_order(empty_file):
    repo = FileEmployeeRepository(FileStore(empty_file))
    repo.add(Employee(1, "Smith", "Clerk", 10))
    repo.add(Employee(2, "Jones", "Manager", 10))

    assert [e.empno for e in repo.list_all()] == [1, 2]
    assert empty_file.read_text(encoding="utf-8").splitlines() == [
        "employee(1,Smith,Clerk,10)",
        "employee(2,Jones,Manager,10)",
    ]


def test_add_does_not_check_duplicates(employees, data_file):
    employees.add(Employee(1, "OTHER", "CLERK", 20))

    lines = data_file.read_text(encoding="utf-8").splitlines()
    assert sum(1 for line in lines if line.startswith("employee(1,")) == 2
    # first match in file order wins
    assert employees.get_by_id(1).name == "SMITH"


def test_add_to_missing_file_raises(missing_file):
    with pytest.raises(StorageError):
        FileEmployeeRepository(FileStore(missing_file)).add(Employee(1, "a", "b", 2))


def test_update_replaces_line_in_place(employees, data_file):
    before = data_file.read_text(encoding="utf-8").splitlines()

    updated = employees.update(2, name="JONES", position="DIRECTOR", depno=10)

    after = data_file.read_text(encoding="utf-8").splitlines()
    assert updated == Employee(2, "JONES", "DIRECTOR", 10)
    assert len(after) == len(before)
    assert after[4] == "employee(2,JONES,DIRECTOR,10)"
    assert [a for i, a in enumerate(after) if i != 4] == [b for i, b in enumerate(before) if i != 4]


def test_update_only_first_duplicate(employees, data_file):
    employees.add(Employee(1, "COPY", "CLERK", 10))
    employees.update(1, name="NEW", position="CLERK", depno=10)

    lines = data_file.read_text(encoding="utf-8").splitlines()
    assert lines[1] == "employee(1,NEW,CLERK,10)"
    assert lines[-1] == "employee(1,COPY,CLERK,10)"


def test_update_missing_record(employees):
    with pytest.raises(NotFoundError):
        employees.update(99, name="a", position="b", depno=1)


def test_update_invalid_key(employees):
    with pytest.raises(InvalidKeyError):
        employees.update("2", name="a", position="b", depno=1)


def test_update_missing_file(missing_file):
    with pytest.raises(StorageError):
        FileEmployeeRepository(FileStore(missing_file)).update(1, name="a", position="b", depno=1)


def test_delete_removes_one_record_and_keeps_other_lines(employees, data_file):
    before = data_file.read_text(encoding="utf-8").splitlines()

    removed = employees.delete(1)

    after = data_file.read_text(encoding="utf-8").splitlines()
    assert removed == Employee(1, "SMITH", "CLERK", 10)
    assert after == [line for line in before if line != "employee(1,SMITH,CLERK,10)"]
    assert employees.get_by_id(1) is None
    assert [e.empno for e in employees.list_all()] == [2, 3]


def test_delete_keeps_departments_and_malformed_lines(employees, departments, data_file):
    employees.delete(3)

    text = data_file.read_text(encoding="utf-8")
    assert "this line is not a record" in text
    assert "employee(oops,BROKEN,LINE,10)" in text
    assert [d.depno for d in departments.list_all()] == [10, 20]


def test_delete_missing_record(employees, data_file):
    before = data_file.read_text(encoding="utf-8")
    with pytest.raises(NotFoundError):
        employees.delete(99)
    assert data_file.read_text(encoding="utf-8") == before


def test_delete_invalid_key(employees):
    with pytest.raises(InvalidKeyError):
        employees.delete(None)


def test_list_by_department(employees):
    assert [e.empno for e in employees.list_by_department(10)] == [1, 3]
    assert [e.empno for e in employees.list_by_department(20)] == [2]


def test_list_by_department_empty(employees):
    assert employees.list_by_department(40) == []
    assert employees.list_by_department("10") == []


def test_update_unencodable_field_keeps_file(employees, data_file):
    before = data_file.read_bytes()
    with pytest.raises(StorageError):
        employees.update(1, name="A\udc80", position="CLERK", depno=10)
    assert data_file.read_bytes() == before


def test_add_unencodable_field_raises_storage_error(employees):
    with pytest.raises(StorageError):
        employees.add(Employee(9, "A\udc80", "CLERK", 10))


def test_update_finds_key_written_with_leading_zero(tmp_path):
    path = tmp_path / "e.txt"
    path.write_text("department(10,A,B)\nemployee(07,SMITH,CLERK,10)\n", encoding="utf-8")
    repo = FileEmployeeRepository(FileStore(path))

    assert repo.get_by_id(7) is not None
    updated = repo.update(7, name="SMITH", position="LEAD", depno=10)

    assert updated == Employee(7, "SMITH", "LEAD", 10)
    assert path.read_text(encoding="utf-8") == "department(10,A,B)\nemployee(7,SMITH,LEAD,10)\n"


def test_update_keeps_crlf_on_untouched_lines(tmp_path):
    path = tmp_path / "e.txt"
    path.write_bytes(b"department(10,A,B)\r\nemployee(1,X,Y,10)\r\nemployee(2,Z,W,10)\r\n")
    repo = FileEmployeeRepository(FileStore(path))

    assert [e.name for e in repo.list_all()] == ["X", "Z"]
    repo.update(1, name="NEW", position="Y", depno=10)

    assert path.read_bytes() == b"department(10,A,B)\r\nemployee(1,NEW,Y,10)\nemployee(2,Z,W,10)\r\n"


def test_delete_keeps_crlf_on_other_lines(tmp_path):
    path = tmp_path / "e.txt"
    path.write_bytes(b"department(10,A,B)\r\nemployee(1,X,Y,10)\r\nemployee(2,Z,W,10)\r\n")
    repo = FileEmployeeRepository(FileStore(path))

    assert repo.get_by_id(2) == Employee(2, "Z", "W", 10)
    repo.delete(1)

    assert path.read_bytes() == b"department(10,A,B)\r\nemployee(2,Z,W,10)\r\n"
