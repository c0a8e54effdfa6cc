"""
Python CLI replacement for the tests/test.sh Ansible role test shim.

Starts a container from a prebuilt geerlingguy/docker-<distro>-ansible
image, runs a playbook inside it, optionally re-runs it to prove
idempotence, and removes the container afterwards.

Settings
--------
Each setting comes from the CLI, then the environment, then a .env file,
then the built-in default:

- distro: a supported distro image (default = "debian9")
- playbook: playbook path relative to role_dir (default = "playbook.yml")
- role_dir: directory mounted into the container (default = $PWD)
- cleanup: remove the container when done (default = true)
- container_id: the --name of the container (default = unix timestamp)
- test_idempotence: run the playbook twice (default = true)
- reuse: reuse a running container named container_id (default = false)
- container_runtime: docker or podman (default = "docker")

Notes
-----
- A prepare playbook at tests/prepare.yml runs before anything else.
- Roles listed in required-roles.yml are installed with ansible-galaxy.
- Any failing step stops the run and leaves the container for inspection.
"""
from __future__ import annotations

import argparse
import logging
import os
import re
import shlex
import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

# Logging configuration: maps verbosity count to logging level
# 0=CRITICAL, 1=ERROR, 2=WARNING, 3=INFO, 4+=DEBUG
LOG_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]

# Exit codes for different failure scenarios
RETURN_CODES = {
    "SUCCESS": 0,                    # Normal completion
    "UNHANDLED_EXCEPTION": 1,        # Unexpected error caught by main()
    "NO_RUNTIME": 2,                 # No container runtime (docker/podman) found
    "CONFIG_ERROR": 3,               # Bad setting (unknown distro, bad boolean)
    "COMMAND_FAILED": 4,             # A runtime or ansible command exited non-zero
    "IDEMPOTENCE_FAILED": 5,         # Second playbook run reported changes/failures
}

DEFAULT_ENV_FILE = Path(".env")
DEFAULT_DISTRO = "debian9"
DEFAULT_PLAYBOOK = "playbook.yml"
DEFAULT_CONTAINER_RUNTIME = "docker"
SUPPORTED_RUNTIMES = ("docker", "podman")

# Layout of the mounted role directory
CONTAINER_MOUNT = "/etc/ansible/playbook"      # role_dir is mounted here, read-write
PREPARE_PLAYBOOK = Path("tests/prepare.yml")
REQUIREMENTS_FILE = Path("required-roles.yml")

IMAGE_TEMPLATE = "geerlingguy/docker-{distro}-ansible:latest"

# Environment passed to every command run inside the container
EXEC_ENV = ("env", "TERM=xterm", "env", "ANSIBLE_FORCE_COLOR=1")

# The recap line of a clean second run, e.g.
# "localhost : ok=3 changed=0 unreachable=0 failed=0 skipped=1"
IDEMPOTENCE_PATTERN = re.compile(r"changed=0.*failed=0")
IDEMPOTENCE_TAIL_LINES = 10
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

TRUE_VALUES = {"true", "yes", "1", "on"}
FALSE_VALUES = {"false", "no", "0", "off"}

# Banner colours
GREEN = "\033[0;32m"
RED = "\033[0;31m"
NEUTRAL = "\033[0m"
BANNER_RULE = "#" * 93


class RoleCheckError(Exception):
    """Base class for failures that end a test run."""


class ConfigError(RoleCheckError):
    pass


class IdempotenceError(RoleCheckError):
    pass


class DistroConfig(NamedTuple):
    init: str
    options: Tuple[str, ...]


class Settings(NamedTuple):
    distro: str
    playbook: str
    role_dir: Path
    cleanup: bool
    container_id: str
    test_idempotence: bool
    reuse: bool
    container_runtime: str


# ----------------------------------------------------------------------------
# Distro table
# ----------------------------------------------------------------------------

_PRIVILEGED = "--privileged"
_DOCKER_VOLUME = "--volume=/var/lib/docker"
_CGROUP_VOLUME = "--volume=/sys/fs/cgroup:/sys/fs/cgroup:ro"

_SYSTEMD = "/lib/systemd/systemd"
_USR_SYSTEMD = "/usr/lib/systemd/systemd"
_SYSV_INIT = "/sbin/init"

DISTROS: Dict[str, DistroConfig] = {
    "centos7": DistroConfig(_USR_SYSTEMD, (_PRIVILEGED, _CGROUP_VOLUME)),
    "centos6": DistroConfig(_SYSV_INIT, (_PRIVILEGED,)),
    "ubuntu1804": DistroConfig(_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "ubuntu1604": DistroConfig(_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "ubuntu1404": DistroConfig(_SYSV_INIT, (_PRIVILEGED, _DOCKER_VOLUME)),
    "ubuntu1204": DistroConfig(_SYSV_INIT, (_PRIVILEGED, _DOCKER_VOLUME)),
    "debian10": DistroConfig(_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "debian9": DistroConfig(_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "debian8": DistroConfig(_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "fedora24": DistroConfig(_USR_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
    "fedora27": DistroConfig(_USR_SYSTEMD, (_PRIVILEGED, _DOCKER_VOLUME, _CGROUP_VOLUME)),
}


def lookup_distro(name: str) -> DistroConfig:
    """Return the init path and runtime options for a distro.

    Raises:
        ConfigError: If the distro has no entry in DISTROS
    """
    try:
        return DISTROS[name]
    except KeyError:
        raise ConfigError(
            f"Unsupported distro {name!r}; choose one of: {', '.join(sorted(DISTROS))}"
        ) from None


def image_for(distro: str) -> str:
    """Return the geerlingguy image reference for a distro."""
    return IMAGE_TEMPLATE.format(distro=distro)


# ----------------------------------------------------------------------------
# Logging helpers
# ----------------------------------------------------------------------------

def configure_logging(verbosity: int, log_file: Optional[Path]) -> None:
    """Configure logging with appropriate level and handlers.

    Args:
        verbosity: Verbosity level (0=CRITICAL, 1=ERROR, 2=WARNING, 3=INFO, 4+=DEBUG)
        log_file: Optional path to write log output to file

    Note:
        Always logs to stderr. If log_file is provided, also writes to that file.
    """
    level_index = min(len(LOG_LEVELS) - 1, verbosity)
    level = LOG_LEVELS[level_index]
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
    )


def _use_color() -> bool:
    """Colour only an interactive stdout, and never when NO_COLOR is set."""
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def banner(message: str, color: str = GREEN) -> None:
    """Print a step banner to stdout, framed by rules of '#'."""
    start, end = (color, NEUTRAL) if _use_color() else ("", "")
    print(f"\n{start}{BANNER_RULE}\n###   {message}\n{BANNER_RULE}{end}\n", flush=True)


# ----------------------------------------------------------------------------
# Configuration
# ----------------------------------------------------------------------------

def load_env_file(path: Path) -> Dict[str, str]:
    """Load variables from a .env file.

    Note:
        - Returns empty dict if file doesn't exist
        - Skips blank lines and comments (lines starting with #)
        - Splits on first '=' to allow '=' in values
    """
    logging.debug("Loading environment file from %s", path)
    if not path.exists():
        logging.debug("Environment file %s does not exist", path)
        return {}

    data: Dict[str, str] = {}
    for raw_line in path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip()
    logging.debug("Loaded %d environment variables from %s", len(data), path)
    return data


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse true/yes/1/on or false/no/0/off, ignoring case and whitespace.

    Raises:
        ConfigError: For any other spelling
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _pick(
    name: str,
    cli_value: Optional[object],
    environ: Mapping[str, str],
    file_values: Mapping[str, str],
    default: str,
) -> object:
    """Pick a setting by precedence: CLI, environment, .env file, default."""
    env_value = environ.get(name)
    if env_value is None:
        env_value = file_values.get(name)

    if cli_value is None:
        if env_value is None:
            logging.debug("Setting %s defaulted to %s", name, default)
            return default
        return env_value

    if env_value is not None and _differs(cli_value, env_value):
        logging.warning("Overriding %s from environment (%s) with CLI value (%s)", name, env_value, cli_value)
    return cli_value


def _differs(cli_value: object, env_value: str) -> bool:
    """Compare a CLI value with an environment string by meaning, not spelling."""
    if isinstance(cli_value, bool):
        normalized = env_value.strip().lower()
        if normalized in TRUE_VALUES:
            return cli_value is not True
        if normalized in FALSE_VALUES:
            return cli_value is not False
        return True
    return env_value.strip() != str(cli_value)


def resolve_settings(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve every setting from CLI arguments, environment, and .env file.

    Args:
        args: Parsed command-line arguments
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Fully resolved Settings

    Raises:
        ConfigError: On a malformed boolean or unsupported runtime
    """
    environ = os.environ if environ is None else environ
    file_values = load_env_file(Path(args.env_file))

    def pick(name: str, default: str) -> object:
        return _pick(name, getattr(args, name, None), environ, file_values, default)

    def pick_bool(name: str, default: str) -> bool:
        value = pick(name, default)
        if isinstance(value, bool):
            return value
        return parse_bool(str(value), name)

    runtime = str(pick("container_runtime", DEFAULT_CONTAINER_RUNTIME))
    if runtime not in SUPPORTED_RUNTIMES:
        raise ConfigError(f"Unsupported container runtime {runtime!r}; choose docker or podman")

    settings = Settings(
        distro=str(pick("distro", DEFAULT_DISTRO)),
        playbook=str(pick("playbook", DEFAULT_PLAYBOOK)),
        role_dir=Path(str(pick("role_dir", os.getcwd()))).resolve(),
        cleanup=pick_bool("cleanup", "true"),
        container_id=str(pick("container_id", str(int(time.time())))),
        test_idempotence=pick_bool("test_idempotence", "true"),
        reuse=pick_bool("reuse", "false"),
        container_runtime=runtime,
    )
    logging.debug("Resolved settings: %s", settings)
    return settings


# ----------------------------------------------------------------------------
# Runtime helpers
# ----------------------------------------------------------------------------

def detect_container_runtime(preferred: Optional[str] = None) -> Optional[str]:
    """Detect an available container runtime.

    Searches in order: preferred (if given), then docker, then podman.
    Returns None when neither is on PATH.
    """
    logging.debug("Detecting container runtime (preferred: %s)", preferred or "none")
    ordered: List[str] = []
    if preferred:
        ordered.append(preferred)
    ordered.extend([r for r in SUPPORTED_RUNTIMES if r not in ordered])

    for candidate in ordered:
        if shutil.which(candidate):
            if preferred and candidate != preferred:
                logging.warning("Container runtime %s not found; falling back to %s", preferred, candidate)
            logging.info("Found container runtime: %s", candidate)
            return candidate
        logging.debug("Container runtime %s not found", candidate)

    logging.warning("No container runtime found")
    return None


def _run_subprocess(
    args: List[str],
    *,
    capture: bool = False,
    env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run a subprocess command with logging and error checking.

    Raises:
        subprocess.CalledProcessError: If command exits with non-zero status
    """
    logging.debug("Running command: %s", " ".join(shlex.quote(a) for a in args))
    return subprocess.run(args, check=True, capture_output=capture, text=True, env=env)


def _tee_subprocess(args: List[str]) -> subprocess.CompletedProcess:
    """Run a command, echoing its output to stdout while capturing it.

    Stderr is merged into stdout. Unlike _run_subprocess, a non-zero exit
    status is returned rather than raised.
    """
    logging.debug("Running command (tee): %s", " ".join(shlex.quote(a) for a in args))
    captured: List[str] = []
    with subprocess.Popen(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    ) as proc:
        for line in proc.stdout:  # type: ignore[union-attr]
            sys.stdout.write(line)
            captured.append(line)
        sys.stdout.flush()
    return subprocess.CompletedProcess(args, proc.returncode, stdout="".join(captured), stderr="")


def exec_command(runtime: str, container_id: str, *cmd: str) -> List[str]:
    """Build a command line that runs cmd inside the container with a TTY."""
    return [runtime, "exec", "--tty", container_id, *EXEC_ENV, *cmd]


def mount_options(runtime: str) -> str:
    """Volume suffix for the role mount.

    Podman gets SELinux relabeling (z) so the container can read the role
    on enforcing hosts.
    """
    return ":rw,z" if runtime == "podman" else ":rw"


def container_path(relative: str) -> str:
    """Map a path relative to role_dir onto its location inside the container."""
    return f"{CONTAINER_MOUNT}/{relative.lstrip('/')}"


# ----------------------------------------------------------------------------
# Container lifecycle
# ----------------------------------------------------------------------------

def container_exists(runtime: str, container_id: str, runner=_run_subprocess) -> bool:
    """Check whether the runtime lists a container matching container_id."""
    result = runner([runtime, "ps", "-f", f"name={container_id}"], capture=True)
    exists = container_id in (result.stdout or "")
    logging.debug("Container %s %s", container_id, "exists" if exists else "does not exist")
    return exists


def start_container(settings: Settings, distro: DistroConfig, runner=_run_subprocess) -> None:
    """Pull the distro image and start a detached container.

    The role directory is mounted read-write at CONTAINER_MOUNT (relabeled
    for SELinux under podman) and the distro's init process runs as PID 1.
    """
    image = image_for(settings.distro)
    runtime = settings.container_runtime
    logging.info("Pulling image %s", image)
    runner([runtime, "pull", image])

    logging.info("Starting container %s from %s", settings.container_id, image)
    runner(
        [
            runtime,
            "run",
            "--detach",
            f"--volume={settings.role_dir}:{CONTAINER_MOUNT}{mount_options(runtime)}",
            "--name",
            settings.container_id,
            *distro.options,
            image,
            distro.init,
        ]
    )
    logging.info("Container %s started", settings.container_id)


def ensure_container(settings: Settings, distro: DistroConfig, runner=_run_subprocess) -> bool:
    """Reuse an existing container when allowed, otherwise start a new one.

    Returns:
        True if an existing container was reused
    """
    image = image_for(settings.distro)
    if settings.reuse and container_exists(settings.container_runtime, settings.container_id, runner=runner):
        banner(f"Container {settings.container_id} already exists. Reusing container {image}.")
        return True

    banner(f"Starting {settings.container_runtime} container: {image}.")
    start_container(settings, distro, runner=runner)
    return False


def remove_container(runtime: str, container_id: str, runner=_run_subprocess) -> None:
    """Force-remove the container, stopping it first if it is running."""
    banner(f"Removing {runtime} container {container_id}...")
    runner([runtime, "rm", "-f", container_id])
    logging.info("Container %s removed", container_id)


# ----------------------------------------------------------------------------
# Playbook steps
# ----------------------------------------------------------------------------

def run_prepare(settings: Settings, runner=_run_subprocess) -> bool:
    """Run tests/prepare.yml if the role ships one. Returns True if it ran."""
    if not (settings.role_dir / PREPARE_PLAYBOOK).is_file():
        logging.debug("No prepare playbook at %s", settings.role_dir / PREPARE_PLAYBOOK)
        return False

    banner("Prepare playbook detected; Running preparation.")
    runner(
        exec_command(
            settings.container_runtime,
            settings.container_id,
            "ansible-playbook",
            container_path(PREPARE_PLAYBOOK.as_posix()),
        )
    )
    return True


def install_requirements(settings: Settings, runner=_run_subprocess) -> bool:
    """Install roles from required-roles.yml with ansible-galaxy, when present."""
    if not (settings.role_dir / REQUIREMENTS_FILE).is_file():
        logging.debug("No requirements file at %s", settings.role_dir / REQUIREMENTS_FILE)
        return False

    banner("Requirements file detected; installing dependencies.")
    runner(
        exec_command(
            settings.container_runtime,
            settings.container_id,
            "ansible-galaxy",
            "install",
            "-r",
            container_path(REQUIREMENTS_FILE.as_posix()),
        )
    )
    return True


def playbook_command(settings: Settings, *extra: str) -> List[str]:
    """Build the in-container ansible-playbook command for the target playbook."""
    return exec_command(
        settings.container_runtime,
        settings.container_id,
        "ansible-playbook",
        container_path(settings.playbook),
        *extra,
    )


def check_syntax(settings: Settings, runner=_run_subprocess) -> None:
    """Run ansible-playbook --syntax-check; a failure raises CalledProcessError."""
    banner("Checking Ansible playbook syntax.")
    runner(playbook_command(settings, "--syntax-check"))


def run_playbook(settings: Settings, runner=_run_subprocess) -> None:
    """Run the target playbook once inside the container."""
    cmd = playbook_command(settings)
    banner(f"Running command: {' '.join(cmd)}")
    runner(cmd)


def is_idempotent(output: str) -> bool:
    """Check the trailing lines of a playbook run for a clean recap.

    ANSI colour codes are stripped first, since commands run with
    ANSIBLE_FORCE_COLOR=1.
    """
    lines = ANSI_ESCAPE.sub("", output).splitlines()
    tail = lines[-IDEMPOTENCE_TAIL_LINES:]
    return any(IDEMPOTENCE_PATTERN.search(line) for line in tail)


def check_idempotence(settings: Settings, runner=_tee_subprocess) -> None:
    """Run the playbook a second time and require that nothing changed.

    Raises:
        IdempotenceError: If the run exits non-zero or its recap reports changes
    """
    banner("Running playbook again: idempotence test")
    result = runner(playbook_command(settings))

    if result.returncode != 0:
        logging.error("Second playbook run exited with status %d", result.returncode)
    elif is_idempotent(result.stdout or ""):
        banner("Idempotence test: pass")
        return

    banner("Idempotence test: fail", color=RED)
    raise IdempotenceError("Idempotence test: fail")


# ----------------------------------------------------------------------------
# Workflow
# ----------------------------------------------------------------------------

def run(args: argparse.Namespace, runner=_run_subprocess, tee_runner=_tee_subprocess) -> int:
    """Run the complete role test workflow.

    Workflow:
        1. Resolve settings and the distro's container options
        2. Find the container runtime
        3. Reuse or start the container
        4. Run the prepare playbook and install requirements, if present
        5. Syntax-check, then run, the playbook
        6. Optionally run it again to check idempotence
        7. Optionally remove the container

    Note:
        Any failure propagates immediately. Once the container exists it
        is left running after a failure so it can be inspected.
    """
    logging.info("Starting role test workflow")
    settings = resolve_settings(args)
    distro = lookup_distro(settings.distro)

    runtime = detect_container_runtime(settings.container_runtime)
    if not runtime:
        logging.error("Neither docker nor podman found; cannot continue")
        return RETURN_CODES["NO_RUNTIME"]
    settings = settings._replace(container_runtime=runtime)

    ensure_container(settings, distro, runner=runner)

    try:
        run_prepare(settings, runner=runner)
        install_requirements(settings, runner=runner)
        check_syntax(settings, runner=runner)
        run_playbook(settings, runner=runner)

        if settings.test_idempotence:
            check_idempotence(settings, runner=tee_runner)
        else:
            logging.info("Idempotence test disabled")
    except (subprocess.CalledProcessError, RoleCheckError):
        logging.error(
            "Run failed; container %s left in place (remove with: %s rm -f %s)",
            settings.container_id,
            runtime,
            settings.container_id,
        )
        raise

    if settings.cleanup:
        remove_container(runtime, settings.container_id, runner=runner)
    else:
        logging.info("Cleanup disabled; container %s left running", settings.container_id)

    logging.info("Role test workflow complete")
    return RETURN_CODES["SUCCESS"]


def list_distros() -> int:
    """Print each supported distro with its init path and runtime options."""
    for name in sorted(DISTROS):
        config = DISTROS[name]
        print(f"{name:<12} {config.init:<26} {' '.join(config.options)}")
    return RETURN_CODES["SUCCESS"]


# ----------------------------------------------------------------------------
# CLI
# ----------------------------------------------------------------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Options left unset stay None so the environment and .env file can
    supply them.
    """
    parser = argparse.ArgumentParser(description="Test an Ansible role or playbook inside a throwaway container")
    parser.add_argument("--env-file", default=str(DEFAULT_ENV_FILE), help="Path to .env file (default: .env)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (repeatable)")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional log file path")
    parser.add_argument("--list-distros", action="store_true", help="List supported distros and exit")

    parser.add_argument("--distro", choices=sorted(DISTROS), help=f"Distro image (default {DEFAULT_DISTRO})")
    parser.add_argument("--playbook", help=f"Playbook relative to the role directory (default {DEFAULT_PLAYBOOK})")
    parser.add_argument("--role-dir", dest="role_dir", help="Directory to mount into the container (default: cwd)")
    parser.add_argument("--container-id", dest="container_id", help="Container name (default: unix timestamp)")
    parser.add_argument("--container-runtime", dest="container_runtime", choices=list(SUPPORTED_RUNTIMES),
                        help=f"Container runtime to use (default {DEFAULT_CONTAINER_RUNTIME})")
    parser.add_argument("--cleanup", action=argparse.BooleanOptionalAction, default=None,
                        help="Remove the container when done (default: on)")
    parser.add_argument("--reuse", action=argparse.BooleanOptionalAction, default=None,
                        help="Reuse a running container with the same name (default: off)")
    parser.add_argument("--idempotence", dest="test_idempotence", action=argparse.BooleanOptionalAction,
                        default=None, help="Run the playbook twice and require no changes (default: on)")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rolecheck CLI.

    Error handling:
        - ConfigError: CONFIG_ERROR
        - IdempotenceError: IDEMPOTENCE_FAILED
        - CalledProcessError: COMMAND_FAILED
        - All other exceptions: logged as critical, UNHANDLED_EXCEPTION
    """
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file)
    logging.debug("Parsed args: %s", args)

    if args.list_distros:
        return list_distros()

    try:
        return run(args)
    except SystemExit:
        raise
    except ConfigError as exc:
        logging.critical("%s", exc)
        return RETURN_CODES["CONFIG_ERROR"]
    except IdempotenceError as exc:
        logging.critical("%s", exc)
        return RETURN_CODES["IDEMPOTENCE_FAILED"]
    except subprocess.CalledProcessError as exc:
        logging.critical("Command failed with status %d: %s", exc.returncode, " ".join(map(str, exc.cmd)))
        return RETURN_CODES["COMMAND_FAILED"]
    except Exception as exc:  # noqa: BLE001
        logging.critical("Unhandled exception: %s", exc)
        return RETURN_CODES["UNHANDLED_EXCEPTION"]


if __name__ == "__main__":
    sys.exit(main())
