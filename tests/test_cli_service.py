"""Tests for service catalog commands."""

from quickquote.cli.main import cli
from quickquote.database.factories import create_sqlite_database


def test_service_add(cli_runner, temp_db, sample_business):
    """Test adding a service with a formatted price."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "service", "add", "Lawn mowing", "--price", "$1,045.50", "--category", "Lawn"],
    )

    assert result.exit_code == 0
    assert "Added service 'Lawn mowing' at $1,045.50" in result.output
    assert temp_db.list_services(sample_business.id)[0].price == 1045.5


def test_service_add_invalid_price(cli_runner, temp_db, sample_business):
    """Test unparseable and non-positive prices are rejected."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "add", "Mowing", "--price", "cheap"]
    )
    assert result.exit_code == 1
    assert "Error: Invalid price" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "add", "Mowing", "--price", "0"]
    )
    assert result.exit_code == 1
    assert "price: Price must be a positive number" in result.output


def test_service_list(cli_runner, temp_db, sample_services):
    """Test listing the catalog."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "service", "list"])

    assert result.exit_code == 0
    assert "Hedge trimming" in result.output
    assert "$45.00" in result.output
    assert result.output.index("Hedge trimming") < result.output.index("Lawn mowing")


def test_service_list_empty(cli_runner, temp_db, sample_business):
    """Test listing an empty catalog."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "service", "list"])

    assert result.exit_code == 0
    assert "No services found" in result.output


def test_service_update(cli_runner, temp_db, sample_services):
    """Test updating a service by name."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "update", "lawn mowing", "--price", "50"]
    )

    assert result.exit_code == 0
    assert "Updated service 'Lawn mowing'" in result.output

    fresh = create_sqlite_database(database_path=temp_db.database_path)
    assert fresh.get_service(sample_services["Lawn mowing"].id).price == 50.0
    fresh.disconnect()


def test_service_update_unknown(cli_runner, temp_db, sample_services):
    """Test updating an unknown service."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "update", "Pool cleaning", "--price", "50"]
    )

    assert result.exit_code == 1
    assert "Error: Service 'Pool cleaning' not found" in result.output


def test_service_remove(cli_runner, temp_db, sample_services):
    """Test removing a service after confirmation."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "remove", "Hedge trimming"], input="y\n"
    )

    assert result.exit_code == 0
    assert "Removed service 'Hedge trimming'" in result.output

    listing = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "service", "list"])
    assert "Hedge trimming" not in listing.output

    listing = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "service", "list", "--all"])
    assert "Hedge trimming (removed)" in listing.output


def test_service_remove_cancelled(cli_runner, temp_db, sample_services):
    """Test declining the confirmation keeps the service."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "remove", "Hedge trimming"], input="n\n"
    )

    assert result.exit_code == 0
    assert "Removal cancelled" in result.output
