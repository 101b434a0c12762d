"""
Initializer service implementation for npminit.

Runs the interactive workflow: look up the default author, collect answers,
then either write the manifest straight away or check the name against the
npm registry first.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from npminit.core.author import GitAuthorResolver
from npminit.core.config_manager import ConfigManager
from npminit.core.prompts import SessionInputs, SessionPrompter
from npminit.ecosystems.npm.manifest import write_manifest
from npminit.ecosystems.npm.naming import validate_package_name
from npminit.ecosystems.npm.registry import NpmRegistryClient
from npminit.rich_utils.ui_helpers import get_console, print_error, print_success, print_warning
from npminit.utils.exceptions import (
    AuthorLookupError,
    ExternalAPIError,
    InvalidPackageNameError,
    ManifestError,
    NameAttemptsExhaustedError,
)

EXIT_OK = 0
EXIT_FAILED = 1


class InitializerService:
    """Concrete implementation of the initializer workflow."""

    def __init__(
        self,
        config: Optional[dict] = None,
        console: Optional[Console] = None,
        prompter: Optional[SessionPrompter] = None,
        author_resolver: Optional[GitAuthorResolver] = None,
        registry_client: Optional[NpmRegistryClient] = None,
    ):
        self.config = config if config is not None else ConfigManager().load_package_default_config()
        self.console = console or get_console()
        self.prompter = prompter or SessionPrompter()
        self.author_resolver = author_resolver or GitAuthorResolver()
        self.registry_client = registry_client
        self.logger = logging.getLogger(__name__)

        manifest_config = self.config.get("manifest", {})
        self.manifest_path = Path(manifest_config.get("path", "package.json"))
        self.license = manifest_config.get("license", "MIT")
        self.manifest_defaults = manifest_config.get("defaults")

        registry_config = self.config.get("registry", {})
        self.max_name_attempts = int(registry_config.get("max_name_attempts", 10))

    def get_default_author(self) -> str:
        """Return the git user name, or an empty author when git can't tell us."""
        try:
            return self.author_resolver.resolve()
        except AuthorLookupError as e:
            self.logger.debug(str(e))
            print_warning(self.console, f"{e}. Continuing with an empty author.")
            return ""

    def execute(self) -> int:
        """Run the whole interactive workflow and return an exit code."""
        author = self.get_default_author()
        inputs = self.prompter.prompt_inputs(author=author)

        if not inputs.publish:
            print_warning(self.console, "Publishing on npm skipped. Initializing package...")
            return self.initialize_package(inputs.package_name, inputs.author, self.license)

        return self.publish_package(inputs)

    def initialize_package(self, package_name: str, author: str, license: str) -> int:
        """Write the manifest without consulting the registry."""
        print_success(self.console, f'Initializing npm package with name "{package_name}"...')
        return EXIT_OK if self.write_manifest(package_name, author, license) else EXIT_FAILED

    def write_manifest(self, package_name: str, author: str, license: str) -> bool:
        """Create or update the manifest, reporting the outcome."""
        try:
            result = write_manifest(
                self.manifest_path,
                package_name,
                author,
                license,
                defaults=self.manifest_defaults,
            )
        except ManifestError as e:
            self.logger.debug(str(e))
            print_error(self.console, str(e))
            return False

        action = "created" if result.created else "updated"
        self.console.print(f"{self.manifest_path.name} {action} successfully!", markup=False)
        return True

    def publish_package(self, inputs: SessionInputs) -> int:
        """Validate the name and check the registry until a free name is found."""
        client = self.registry_client or self._create_registry_client(inputs.proxy_url)
        try:
            package_name = self.find_available_name(client, inputs.package_name)
        except InvalidPackageNameError as e:
            print_error(self.console, "Invalid package name:")
            for message in e.messages:
                print_error(self.console, f"- {message}")
            return EXIT_FAILED
        except ExternalAPIError as e:
            print_error(self.console, "An error occurred while checking package availability on npm.")
            print_error(self.console, str(e))
            return EXIT_FAILED
        except NameAttemptsExhaustedError as e:
            self.logger.debug(str(e))
            print_error(self.console, str(e))
            return EXIT_FAILED
        finally:
            if self.registry_client is None:
                client.close()

        print_success(
            self.console,
            f'Initializing npm package with name "{package_name}" for publishing...',
        )
        if not self.write_manifest(package_name, inputs.author, self.license):
            return EXIT_FAILED
        print_success(self.console, "Npm package initialized successfully!")
        return EXIT_OK

    def find_available_name(self, client: NpmRegistryClient, package_name: str) -> str:
        """Return the first candidate name that is free on the registry.

        Starts with ``package_name`` and asks for another one each time the
        registry reports the name as taken.

        Raises:
            InvalidPackageNameError: a candidate breaks npm naming rules.
            ExternalAPIError: the registry could not be queried.
            NameAttemptsExhaustedError: ``max_name_attempts`` names were taken.
        """
        attempts = 0
        while True:
            attempts += 1
            validation = validate_package_name(package_name)
            if validation.problems:
                raise InvalidPackageNameError(package_name, validation.problems)

            availability = client.check_availability(package_name)
            if availability.available:
                print_success(self.console, f'Package name "{package_name}" is available on npm.')
                return package_name

            print_error(self.console, f'Package name "{package_name}" is not available on npm.')
            if self.max_name_attempts and attempts >= self.max_name_attempts:
                raise NameAttemptsExhaustedError(attempts, package_name)
            package_name = self.prompter.prompt_alternative_name()

    def _create_registry_client(self, proxy_url: str) -> NpmRegistryClient:
        registry_config = self.config.get("registry", {})
        return NpmRegistryClient(
            registry_url=registry_config.get("url", "https://registry.npmjs.com"),
            proxy_url=proxy_url,
            timeout=registry_config.get("timeout", 30),
        )
