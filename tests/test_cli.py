"""End-to-end tests for the finwrap CLI."""

import json
import shutil

import pytest

from finance_wrapped.cli.main import cli


@pytest.fixture
def invoke(cli_runner, data_dir):
    """Run the CLI against the temporary data directory."""

    def _invoke(*args, input=None):
        return cli_runner.invoke(cli, ["--data-dir", str(data_dir), *args], input=input)

    return _invoke


def _read_transactions(data_dir):
    return json.loads((data_dir / "transactions.json").read_text(encoding="utf-8"))


def test_add_transaction(invoke, data_dir):
    result = invoke("add", "--date", "2024-01-15", "--amount", "(50.00)", "--description", "Groceries")

    assert result.exit_code == 0
    assert "Created transaction 1" in result.output
    stored = _read_transactions(data_dir)
    assert stored[0]["amount"] == -50
    assert stored[0]["category"] == "unsorted"
    assert stored[0]["transactionType"] == "expense"


def test_add_rejects_bad_amount(invoke):
    result = invoke("add", "--date", "2024-01-15", "--amount", "lots")
    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_add_warns_about_unknown_category(invoke):
    result = invoke("add", "--date", "2024-01-15", "--amount", "-5", "--category", "nope")
    assert result.exit_code == 0
    assert "category 'nope' does not exist" in result.output


def test_list_empty(invoke):
    result = invoke("transaction", "list")
    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_list_filters_by_type(invoke):
    invoke("add", "--date", "2024-01-15", "--amount", "-5", "--description", "Coffee")
    invoke("add", "--date", "2024-01-16", "--amount", "900", "--description", "Pay", "--type", "income")

    result = invoke("transaction", "list", "--type", "income")

    assert result.exit_code == 0
    assert "Found 1 transaction(s):" in result.output
    assert "Pay" in result.output
    assert "Coffee" not in result.output


def test_update_transaction(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")

    result = invoke("transaction", "update", "1", "--amount", "-7.50", "--category", "sorted")

    assert result.exit_code == 0
    assert "Updated transaction 1" in result.output
    stored = _read_transactions(data_dir)[0]
    assert stored["amount"] == -7.5
    assert stored["category"] == "sorted"


def test_update_requires_fields(invoke):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")
    result = invoke("transaction", "update", "1")
    assert result.exit_code == 1
    assert "No fields to update" in result.output


def test_update_missing_transaction(invoke):
    result = invoke("transaction", "update", "42", "--amount", "1")
    assert result.exit_code == 1
    assert "Transaction 42 not found" in result.output


def test_delete_transaction(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")

    result = invoke("transaction", "delete", "1", "--yes")

    assert result.exit_code == 0
    assert "Deleted transaction 1" in result.output
    assert _read_transactions(data_dir) == []


def test_delete_can_be_cancelled(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")

    result = invoke("transaction", "delete", "1", input="n\n")

    assert "Deletion cancelled." in result.output
    assert len(_read_transactions(data_dir)) == 1


def test_split_transaction(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-50", "--description", "Market")

    result = invoke(
        "transaction", "split", "1",
        "--part", "-30", "Food", "food",
        "--part", "-20", "Soap", "",
    )

    assert result.exit_code == 0
    assert "Split transaction 1 into 2 parts:" in result.output
    stored = _read_transactions(data_dir)
    assert stored[0]["isSplit"] is True
    assert [t["parentId"] for t in stored[1:]] == [1, 1]
    assert [t["category"] for t in stored[1:]] == ["food", "unsorted"]
    assert {t["date"] for t in stored} == {"2024-01-15"}


def test_split_mismatch_changes_nothing(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-50")

    result = invoke("transaction", "split", "1", "--part", "-30", "A", "", "--part", "-10", "B", "")

    assert result.exit_code == 1
    assert "don't match parent" in result.output
    stored = _read_transactions(data_dir)
    assert len(stored) == 1
    assert stored[0]["isSplit"] is False


def test_bulk_edit(invoke, data_dir):
    for amount in ("-1", "-2", "-3"):
        invoke("add", "--date", "2024-01-15", "--amount", amount)

    result = invoke("transaction", "bulk-edit", "1", "3", "--category", "sorted")

    assert result.exit_code == 0
    assert "Updated 2 transaction(s)" in result.output
    assert [t["category"] for t in _read_transactions(data_dir)] == ["sorted", "unsorted", "sorted"]


def test_import_csv(invoke, fixtures_dir, data_dir):
    result = invoke("import", str(fixtures_dir / "bank1_january.csv"))

    assert result.exit_code == 0
    assert "Imported: 3 transactions" in result.output
    assert "Period: 2024-01-05 to 2024-01-31" in result.output
    assert "Status: completed" in result.output
    assert len(_read_transactions(data_dir)) == 3


def test_import_overlap_cancelled_without_input(invoke, fixtures_dir, data_dir):
    invoke("import", str(fixtures_dir / "bank1_january.csv"))

    result = invoke("import", str(fixtures_dir / "bank1_mid_january.csv"), "--no-input")

    assert result.exit_code == 1
    assert "overlaps" in result.output
    assert "bank1_january.csv" in result.output
    assert "Import cancelled." in result.output
    assert len(_read_transactions(data_dir)) == 3


def test_import_overlap_declined_at_prompt(invoke, fixtures_dir, data_dir):
    invoke("import", str(fixtures_dir / "bank1_january.csv"))

    result = invoke("import", str(fixtures_dir / "bank1_mid_january.csv"), input="n\n")

    assert result.exit_code == 1
    assert "Import cancelled." in result.output
    assert len(_read_transactions(data_dir)) == 3


def test_import_overlap_confirmed_at_prompt(invoke, fixtures_dir, data_dir):
    invoke("import", str(fixtures_dir / "bank1_january.csv"))

    result = invoke("import", str(fixtures_dir / "bank1_mid_january.csv"), input="y\n")

    assert result.exit_code == 0
    assert "Status: override" in result.output
    assert len(_read_transactions(data_dir)) == 5


def test_import_with_override_flag(invoke, fixtures_dir):
    invoke("import", str(fixtures_dir / "bank1_january.csv"))

    result = invoke("import", str(fixtures_dir / "bank1_mid_january.csv"), "--override")

    assert result.exit_code == 0
    assert "Status: override" in result.output


def test_import_unknown_template(invoke, fixtures_dir):
    result = invoke("import", str(fixtures_dir / "bank1_january.csv"), "--template", "Nope")
    assert result.exit_code == 1
    assert "CSV template 'Nope' not found" in result.output


def test_statement_list(invoke, fixtures_dir):
    assert "No bank statements found." in invoke("statement", "list").output

    invoke("import", str(fixtures_dir / "bank1_january.csv"))
    result = invoke("statement", "list")

    assert result.exit_code == 0
    assert "bank1_january.csv" in result.output
    assert "completed" in result.output


def test_template_create_and_list(invoke):
    result = invoke(
        "template", "create", "Bank3",
        "--date-column", "1", "--amount-column", "2", "--desc-column", "3", "--has-header",
    )
    assert result.exit_code == 0
    assert "Created CSV template 'Bank3' (now the default)" in result.output

    listing = invoke("template", "list").output
    assert "* Bank3" in listing
    assert "  Bank1" in listing


def test_template_create_duplicate(invoke):
    result = invoke(
        "template", "create", "Bank1",
        "--date-column", "0", "--amount-column", "1", "--desc-column", "2",
    )
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_category_create_and_list(invoke):
    result = invoke("category", "create", "food", "--display-name", "Food & Drink")
    assert result.exit_code == 0
    assert "Created category 'food'" in result.output

    listing = invoke("category", "list").output
    assert "food (Food & Drink)" in listing
    assert "* unsorted" in listing


def test_category_create_duplicate(invoke):
    result = invoke("category", "create", "unsorted")
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_restore(invoke, fixtures_dir, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")
    shutil.copy(fixtures_dir / "backup.json", data_dir / "backup.json")

    result = invoke("restore", "--yes")

    assert result.exit_code == 0
    assert "Restored 2 transactions from backup" in result.output
    assert [t["description"] for t in _read_transactions(data_dir)] == ["Dinner", "Salary"]


def test_restore_missing_backup(invoke, data_dir):
    invoke("add", "--date", "2024-01-15", "--amount", "-5")

    result = invoke("restore", "--yes")

    assert result.exit_code == 1
    assert "Failed to read backup file" in result.output
    assert len(_read_transactions(data_dir)) == 1


def test_corrupt_store_exits(invoke, data_dir):
    (data_dir / "transactions.json").write_text("{not json", encoding="utf-8")

    result = invoke("transaction", "list")

    assert result.exit_code == 1
    assert "Could not load" in result.output


def test_data_dir_from_environment(cli_runner, data_dir):
    result = cli_runner.invoke(
        cli,
        ["add", "--date", "2024-01-15", "--amount", "-5"],
        env={"FINWRAP_HOME": str(data_dir)},
    )
    assert result.exit_code == 0
    assert (data_dir / "transactions.json").exists()


def test_bad_log_level(invoke):
    result = invoke("--log-level", "LOUD", "transaction", "list")
    assert result.exit_code == 2


def test_statement_show(invoke, fixtures_dir):
    invoke("import", str(fixtures_dir / "bank1_january.csv"))

    result = invoke("statement", "show", "1")

    assert result.exit_code == 0
    assert "File: bank1_january.csv" in result.output
    assert "Period: 2024-01-05 to 2024-01-31" in result.output
    assert "Status: completed" in result.output


def test_statement_show_missing(invoke):
    result = invoke("statement", "show", "7")
    assert result.exit_code == 1
    assert "Bank statement 7 not found" in result.output


def test_create_reports_stored_names(invoke):
    result = invoke(
        "template", "create", "  Bank3 ",
        "--date-column", "0", "--amount-column", "1", "--desc-column", "2",
    )
    assert "Created CSV template 'Bank3' (now the default)" in result.output

    result = invoke("category", "create", " food ")
    assert "Created category 'food'" in result.output


def test_import_drops_out_of_range_amount(invoke, tmp_path, data_dir):
    csv_path = tmp_path / "huge.csv"
    csv_path.write_text("2024-01-01,-10.00,a,b,Coffee\n2024-01-02,1e5000,a,b,Bogus\n", encoding="utf-8")

    result = invoke("import", str(csv_path))

    assert result.exit_code == 0
    assert "Imported: 1 transactions" in result.output
    assert [t["description"] for t in _read_transactions(data_dir)] == ["Coffee"]
