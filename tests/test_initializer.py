"""
Test suite for the InitializerService workflow.

Covers the skip-registry path, the publish path (available, taken, invalid
name, registry failure) and the git author fallback.

Run with: pytest tests/test_initializer.py -xvs
"""

import json
import logging
from unittest.mock import Mock

import pytest
from rich.console import Console

from npminit.core.config_manager import ConfigManager
from npminit.core.initializer import EXIT_FAILED, EXIT_OK, InitializerService
from npminit.core.prompts import SessionInputs
from npminit.ecosystems.npm.registry import RegistryAvailability
from npminit.utils.exceptions import APIConnectionError, AuthorLookupError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def console():
    return Console(record=True, no_color=True, width=200)


def _service(console, inputs=None, alternatives=(), availability=(), author="Jane Doe", config=None):
    prompter = Mock()
    prompter.prompt_inputs.side_effect = lambda author="": SessionInputs(
        package_name=inputs.package_name,
        publish=inputs.publish,
        proxy_url=inputs.proxy_url,
        author=author,
    )
    prompter.prompt_alternative_name.side_effect = list(alternatives)

    resolver = Mock()
    if isinstance(author, Exception):
        resolver.resolve.side_effect = author
    else:
        resolver.resolve.return_value = author

    registry = Mock()
    registry.check_availability.side_effect = [
        RegistryAvailability(package=name, available=free, status_code=404 if free else 200)
        for name, free in availability
    ]

    service = InitializerService(
        config=config or ConfigManager().load_package_default_config(),
        console=console,
        prompter=prompter,
        author_resolver=resolver,
        registry_client=registry,
    )
    return service, prompter, registry


def _manifest(workdir):
    return json.loads((workdir / "package.json").read_text(encoding="utf-8"))


class TestInitializerService:

    def test_skip_publish_writes_manifest_without_network(self, workdir, console):
        service, _, registry = _service(console, SessionInputs("my-lib", publish=False))

        assert service.execute() == EXIT_OK

        registry.check_availability.assert_not_called()
        data = _manifest(workdir)
        assert data["name"] == "my-lib"
        assert data["author"] == "Jane Doe"
        assert data["license"] == "MIT"
        output = console.export_text()
        assert "Publishing on npm skipped. Initializing package..." in output
        assert 'Initializing npm package with name "my-lib"...' in output
        assert "package.json created successfully!" in output

    def test_skip_publish_accepts_empty_name(self, workdir, console):
        service, _, _ = _service(console, SessionInputs("", publish=False))

        assert service.execute() == EXIT_OK
        assert _manifest(workdir)["name"] == ""

    def test_publish_available_name(self, workdir, console):
        service, _, registry = _service(
            console, SessionInputs("my-lib", publish=True), availability=[("my-lib", True)]
        )

        assert service.execute() == EXIT_OK

        registry.check_availability.assert_called_once_with("my-lib")
        data = _manifest(workdir)
        assert data["name"] == "my-lib"
        assert data["license"] == "MIT"
        assert data["version"] == "1.0.0"
        output = console.export_text()
        assert 'Package name "my-lib" is available on npm.' in output
        assert "Npm package initialized successfully!" in output

    def test_taken_name_prompts_again(self, workdir, console):
        service, prompter, registry = _service(
            console,
            SessionInputs("react", publish=True, proxy_url="http://proxy:8080"),
            alternatives=["react-thing"],
            availability=[("react", False), ("react-thing", True)],
        )

        assert service.execute() == EXIT_OK

        assert prompter.prompt_alternative_name.call_count == 1
        assert [c.args[0] for c in registry.check_availability.call_args_list] == ["react", "react-thing"]
        data = _manifest(workdir)
        assert data["name"] == "react-thing"
        assert data["author"] == "Jane Doe"
        assert 'Package name "react" is not available on npm.' in console.export_text()

    def test_taken_name_does_not_write_before_a_free_one(self, workdir, console):
        service, _, _ = _service(
            console,
            SessionInputs("react", publish=True),
            alternatives=["vue"],
            availability=[("react", False), ("vue", False)],
            config={"registry": {"max_name_attempts": 2}},
        )

        assert service.execute() == EXIT_FAILED
        assert not (workdir / "package.json").exists()
        assert "No available package name after 2 attempt(s)" in console.export_text()

    def test_proxy_url_reaches_registry_client(self, workdir, console):
        service, _, _ = _service(console, SessionInputs("my-lib", publish=True, proxy_url="http://proxy:8080"))
        service.registry_client = None

        created = []

        def fake_client(proxy_url):
            client = Mock()
            client.check_availability.return_value = RegistryAvailability("my-lib", True, 404)
            created.append((proxy_url, client))
            return client

        service._create_registry_client = fake_client

        assert service.execute() == EXIT_OK
        assert created[0][0] == "http://proxy:8080"
        created[0][1].close.assert_called_once()

    def test_invalid_name_aborts_with_itemized_messages(self, workdir, console):
        service, _, registry = _service(console, SessionInputs("_Bad Name", publish=True))

        assert service.execute() == EXIT_FAILED

        registry.check_availability.assert_not_called()
        assert not (workdir / "package.json").exists()
        output = console.export_text()
        assert "Invalid package name:" in output
        assert "- name cannot start with an underscore" in output
        assert "- name can no longer contain capital letters" in output

    def test_registry_failure_aborts(self, workdir, console):
        service, _, registry = _service(console, SessionInputs("my-lib", publish=True))
        registry.check_availability.side_effect = APIConnectionError("Network connection failed")

        assert service.execute() == EXIT_FAILED

        assert not (workdir / "package.json").exists()
        assert "An error occurred while checking package availability on npm." in console.export_text()

    def test_invalid_existing_manifest_is_left_unchanged(self, workdir, console):
        (workdir / "package.json").write_text("{broken", encoding="utf-8")
        service, _, _ = _service(
            console, SessionInputs("my-lib", publish=True), availability=[("my-lib", True)]
        )

        assert service.execute() == EXIT_FAILED

        assert (workdir / "package.json").read_text(encoding="utf-8") == "{broken"
        assert "Error reading package.json file" in console.export_text()

    def test_existing_manifest_keeps_custom_fields(self, workdir, console):
        (workdir / "package.json").write_text(
            json.dumps({"name": "old", "dependencies": {"left-pad": "^1.0.0"}}), encoding="utf-8"
        )
        service, _, _ = _service(console, SessionInputs("my-lib", publish=False))

        assert service.execute() == EXIT_OK

        data = _manifest(workdir)
        assert data == {
            "name": "my-lib",
            "dependencies": {"left-pad": "^1.0.0"},
            "author": "Jane Doe",
            "license": "MIT",
        }
        assert "package.json updated successfully!" in console.export_text()

    def test_author_lookup_failure_falls_back_to_empty(self, workdir, console):
        service, prompter, _ = _service(
            console,
            SessionInputs("my-lib", publish=False),
            author=AuthorLookupError("Error getting default author name: not configured"),
        )

        assert service.execute() == EXIT_OK

        prompter.prompt_inputs.assert_called_once_with(author="")
        assert _manifest(workdir)["author"] == ""
        assert "Continuing with an empty author." in console.export_text()

    def test_configured_manifest_path_and_license(self, workdir, console):
        config = ConfigManager().load_package_default_config()
        config["manifest"]["path"] = "custom.json"
        config["manifest"]["license"] = "ISC"
        service, _, _ = _service(console, SessionInputs("my-lib", publish=False), config=config)

        assert service.execute() == EXIT_OK

        data = json.loads((workdir / "custom.json").read_text(encoding="utf-8"))
        assert data["license"] == "ISC"

    def test_reported_errors_are_not_logged_above_debug(self, workdir, console, caplog):
        service, _, registry = _service(
            console,
            SessionInputs("my-lib", publish=True),
            author=AuthorLookupError("Error getting default author name: git"),
        )
        registry.check_availability.side_effect = APIConnectionError("Network connection failed")

        with caplog.at_level(logging.WARNING):
            assert service.execute() == EXIT_FAILED

        assert caplog.records == []
        output = console.export_text()
        assert "Continuing with an empty author." in output
        assert "An error occurred while checking package availability on npm." in output
