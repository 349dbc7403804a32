"""Describe the host environment and cache the description on disk."""

import logging
import os
import platform
import re
import subprocess
from pathlib import Path

from shellwizard.errors import CacheWriteError

log = logging.getLogger(__name__)

OS_RELEASE_FILE = Path("/etc/os-release")
PRETTY_NAME_RE = re.compile(r'PRETTY_NAME="(.*?)"')


def get_linux_release(os_release: Path = OS_RELEASE_FILE) -> str | None:
    """Return the distro pretty name, or the raw os-release text if it has none."""
    try:
        data = os_release.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log.debug("could not read %s: %s", os_release, e)
        return None
    match = PRETTY_NAME_RE.search(data)
    if match:
        return match.group(1)
    log.debug("no PRETTY_NAME in %s, using raw contents", os_release)
    return data


def get_macos_version() -> str:
    """Run `sw_vers` and return its output."""
    try:
        result = subprocess.run(["sw_vers"], capture_output=True, text=True)
    except OSError as e:
        log.debug("sw_vers failed: %s", e)
        return ""
    return result.stdout


def probe_environment() -> str:
    """Return a fresh description of the OS, architecture and shell."""
    system = platform.system().lower()
    lines = [
        f"OS: {system}",
        f"Architecture: {platform.machine()}",
        f"Shell: {os.environ.get('SHELL', '')}",
    ]
    info = "\n".join(lines) + "\n"

    if system == "linux":
        release = get_linux_release()
        if release is not None:
            info += f"OS Release Info:\n{release}\n"
    elif system == "darwin":
        info += "MacOS Version:\n" + get_macos_version()

    log.debug("probed environment: %r", info)
    return info


def read_cached_environment(cache_file: Path) -> str | None:
    """Return cached environment text, or None when absent or empty."""
    try:
        content = cache_file.read_text(encoding="utf-8")
    except OSError:
        return None
    return content or None


def write_cached_environment(cache_file: Path, info: str) -> None:
    """Write environment text to the cache, raising CacheWriteError on failure."""
    try:
        cache_file.write_text(info, encoding="utf-8")
    except OSError as e:
        raise CacheWriteError(f"could not write {cache_file}: {e}") from e


def get_environment(cache_file: Path) -> str:
    """Return the cached environment description, probing and caching on a miss."""
    cached = read_cached_environment(cache_file)
    if cached is not None:
        log.debug("using cached environment from %s", cache_file)
        return cached

    info = probe_environment()
    try:
        write_cached_environment(cache_file, info)
    except CacheWriteError as e:
        log.debug("%s", e)
    return info
