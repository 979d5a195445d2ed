"""Core scaffolding sequence for frontend/backend web projects."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from speedy.core.config import get_config
from speedy.core.errors import ExternalToolError, ProjectIOError, ValidationError
from speedy.core.logger import get_logger
from speedy.scaffold import templates
from speedy.services.launcher import ProcessLauncher
from speedy.services.tools import (
    ExternalTool,
    PackageInstaller,
    ProjectGenerator,
    SchemaInitializer,
)

logger = get_logger(__name__)

AFFIRMATIVE_ANSWERS = {"y", "yes"}

STYLING_PACKAGES = ["tailwindcss@3", "postcss", "autoprefixer"]
ROUTER_PACKAGES = ["react-router-dom"]
BACKEND_PACKAGES = ["express", "cors", "dotenv"]
ORM_DEV_PACKAGES = ["prisma"]
ORM_CLIENT_PACKAGES = ["@prisma/client"]


@dataclass
class ScaffoldOptions:
    """Feature flags for one scaffolding run."""

    with_styling: bool = True
    with_router: bool = False
    with_database: bool = False
    launch_servers: bool = False


def is_affirmative(answer: Optional[str]) -> bool:
    """Return True when a yes/no answer is ``y`` or ``yes`` (any case)."""
    return (answer or "").strip().lower() in AFFIRMATIVE_ANSWERS


def validate_project_name(raw: Optional[str]) -> str:
    """Return the stripped project name.

    Raises:
        ValidationError: If the name is empty or whitespace only
    """
    name = (raw or "").strip()
    if not name:
        raise ValidationError("Directory name cannot be empty.")
    return name


class ScaffoldManager:
    """Runs the fail-fast scaffolding sequence.

    Each external invocation is checked as soon as it returns and the first
    failure aborts the run. Nothing created before the failure is removed.
    """

    def __init__(
        self,
        generator: Optional[ExternalTool] = None,
        installer: Optional[ExternalTool] = None,
        initializer: Optional[ExternalTool] = None,
        launcher: Optional[ProcessLauncher] = None,
        mock: bool = False,
    ):
        self.generator = generator or ProjectGenerator(mock=mock)
        self.installer = installer or PackageInstaller(mock=mock)
        self.initializer = initializer or SchemaInitializer(mock=mock)
        self.launcher = launcher or ProcessLauncher(mock=mock)

    def scaffold_project(
        self,
        name: str,
        options: Optional[ScaffoldOptions] = None,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """Scaffold ``<output_dir>/<name>/frontend`` and ``.../backend``.

        Args:
            name: Project directory name (validated before anything is created)
            options: Optional features to wire up
            output_dir: Parent directory (defaults to current dir)

        Returns:
            Path to the created project root

        Raises:
            ValidationError: Empty project name
            ProjectIOError: A directory or file could not be created
            ExternalToolError: A generator, installer or initializer failed
        """
        name = validate_project_name(name)
        options = options or ScaffoldOptions()
        output_dir = Path(output_dir) if output_dir else Path.cwd()

        project_root = self._create_directory(output_dir / name)
        logger.info(f"✨ Creating project: {project_root}")

        frontend_dir = self._scaffold_frontend(project_root)

        if options.with_styling:
            self._add_styling(frontend_dir)

        if options.with_router:
            self._add_router(frontend_dir)

        backend_dir = self._scaffold_backend(project_root)

        if options.with_database:
            self._add_database(backend_dir)

        if options.launch_servers:
            self.launch_dev_servers(project_root)

        return project_root

    def launch_dev_servers(self, project_root: Path) -> None:
        """Start both dev servers in separate terminal sessions without waiting."""
        runner = get_config().package_runner
        logger.info("Starting both frontend and backend servers...")
        self.launcher.launch([runner, "run", "dev"], project_root / "frontend")
        self.launcher.launch([runner, "run", "index.ts"], project_root / "backend")

    def _scaffold_frontend(self, project_root: Path) -> Path:
        """Create the Vite/React/TypeScript frontend and install its dependencies."""
        logger.info("Setting up frontend with Vite/React/TypeScript...")
        frontend_dir = self._create_directory(project_root / "frontend")

        template = get_config().frontend_template
        self._run_step(
            self.generator,
            ["create", "vite", ".", "--template", template],
            frontend_dir,
            "Error initializing frontend project.",
        )
        self._run_step(
            self.installer,
            ["install"],
            frontend_dir,
            "Error during install for frontend.",
        )
        logger.info("📁 Frontend ready")
        return frontend_dir

    def _add_styling(self, frontend_dir: Path) -> None:
        logger.info("Installing Tailwind CSS...")
        self._run_step(
            self.installer,
            ["add", "-d", *STYLING_PACKAGES],
            frontend_dir,
            "Error installing Tailwind CSS.",
        )
        self._run_step(
            self.initializer,
            ["tailwindcss", "init", "-p"],
            frontend_dir,
            "Error initializing Tailwind CSS.",
        )
        self._write_file(frontend_dir / "tailwind.config.js", templates.TAILWIND_CONFIG)
        self._write_file(frontend_dir / "src" / "index.css", templates.INDEX_CSS)
        logger.info("🎨 Tailwind CSS configured")

    def _add_router(self, frontend_dir: Path) -> None:
        logger.info("Installing React Router...")
        self._run_step(
            self.installer,
            ["add", *ROUTER_PACKAGES],
            frontend_dir,
            "Error installing React Router.",
        )
        pages_dir = self._create_directory(frontend_dir / "src" / "pages")
        self._write_file(pages_dir / "Home.tsx", templates.HOME_PAGE)
        self._write_file(pages_dir / "About.tsx", templates.ABOUT_PAGE)
        self._write_file(frontend_dir / "src" / "App.tsx", templates.APP_WITH_ROUTER)
        logger.info("🧭 React Router configured")

    def _scaffold_backend(self, project_root: Path) -> Path:
        """Create the Bun/Express backend and its server entry point."""
        logger.info("Setting up backend with Bun/Express...")
        backend_dir = self._create_directory(project_root / "backend")

        self._run_step(
            self.generator,
            ["init", "-y"],
            backend_dir,
            "Error initializing backend project.",
        )
        self._run_step(
            self.installer,
            ["add", *BACKEND_PACKAGES],
            backend_dir,
            "Error installing backend dependencies.",
        )
        self._write_file(backend_dir / "index.ts", templates.SERVER_ENTRY)
        logger.info("🔧 Backend setup complete!")
        return backend_dir

    def _add_database(self, backend_dir: Path) -> None:
        logger.info("Setting up Prisma with PostgreSQL...")
        self._run_step(
            self.installer,
            ["add", "-d", *ORM_DEV_PACKAGES],
            backend_dir,
            "Error installing Prisma.",
        )
        self._run_step(
            self.installer,
            ["add", *ORM_CLIENT_PACKAGES],
            backend_dir,
            "Error installing Prisma client.",
        )
        self._run_step(
            self.initializer,
            ["prisma", "init"],
            backend_dir,
            "Error initializing Prisma.",
        )

        self._write_file(backend_dir / ".env", templates.ENV_FILE)
        self._write_file(backend_dir / "prisma" / "schema.prisma", templates.PRISMA_SCHEMA)
        self._write_file(backend_dir / "docker-compose.yml", templates.DOCKER_COMPOSE)
        logger.info("🐘 Database configured")

    def _run_step(self, tool: ExternalTool, args: List[str], cwd: Path, failure: str) -> None:
        result = tool.run(args, cwd)
        if not result.ok:
            logger.error(failure)
            raise ExternalToolError(failure, result)

    def _create_directory(self, path: Path) -> Path:
        """Create a directory that must not already exist."""
        try:
            path.mkdir(parents=True, exist_ok=False)
        except OSError as e:
            logger.error(f"Error creating directory {path}: {e}")
            raise ProjectIOError(f"Error creating directory {path}: {e}", path) from e
        return path

    def _write_file(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            raise ProjectIOError(f"Error writing {path}: {e}", path) from e


def next_steps(project_dir, options: ScaffoldOptions) -> List[str]:
    """Return the follow-up instructions printed after a successful run.

    Args:
        project_dir: Project directory as the user should type it after `cd`
        options: Features that were scaffolded
    """
    runner = get_config().package_runner
    executor = get_config().package_executor

    steps = [
        f"cd {project_dir}/frontend && {runner} run dev",
        f"cd {project_dir}/backend && {runner} run index.ts",
    ]
    if options.with_router:
        steps.append("Add pages under frontend/src/pages and routes in frontend/src/App.tsx")
    if options.with_database:
        steps.extend([
            f"cd {project_dir}/backend && docker compose up -d",
            f"cd {project_dir}/backend && {executor} prisma migrate dev --name init",
            f"cd {project_dir}/backend && {executor} prisma studio",
        ])
    return steps
