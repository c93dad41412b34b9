"""Built-in health checks for the core systems."""

from __future__ import annotations

import platform

import psutil

from .build_info import BuildInfo, current
from .check import CheckResult, SystemCheck
from .runner import HealthCheckReport, HealthCheckRunner
from .world import World

BYTES_PER_GB = 1_073_741_824.0


class BuildInfoCheck(SystemCheck):
    """Checks that build metadata is accessible."""

    name = "Build Info"

    def __init__(self, info: BuildInfo | None = None) -> None:
        self._info = info

    def description(self) -> str | None:
        return "Validates build metadata (git, runtime, timestamps)"

    def check(self) -> CheckResult:
        info = self._info if self._info is not None else current()
        dirty = str(info.is_git_dirty()).lower()
        details = [
            f"  Git: {info.git_branch}@{info.git_sha_short()} (dirty: {dirty})",
            f"  Build time: {info.build_timestamp}",
            f"  Runtime: {info.runtime_version} ({info.runtime_channel})",
            f"  Target: {info.target_triple}",
            f"  Opt level: {info.opt_level}",
        ]
        return CheckResult.passed("Build metadata accessible").with_details("\n".join(details))


class SystemInfoCheck(SystemCheck):
    """Checks that OS, CPU and memory information can be gathered."""

    name = "System Info"

    def description(self) -> str | None:
        return "Validates OS, CPU, and memory information gathering"

    def check(self) -> CheckResult:
        os_name = platform.system() or "Unknown"
        os_version = platform.version() or "Unknown"
        kernel_version = platform.release() or "Unknown"
        details = [f"  OS: {os_name} {os_version}", f"  Kernel: {kernel_version}"]

        physical_cores = psutil.cpu_count(logical=False) or 0
        logical_cores = psutil.cpu_count(logical=True) or 0
        if physical_cores == 0 or logical_cores == 0:
            return CheckResult.warned("Unable to detect CPU cores").with_details("\n".join(details))
        details.append(f"  CPU cores: {physical_cores} physical, {logical_cores} logical")

        total_memory_gb = psutil.virtual_memory().total / BYTES_PER_GB
        if total_memory_gb < 1.0:
            return CheckResult.warned("Low memory detected").with_details("\n".join(details))
        details.append(f"  Memory: {total_memory_gb:.1f} GB total")

        hostname = platform.node()
        if hostname:
            details.append(f"  Hostname: {hostname}")

        return CheckResult.passed("System info gathered successfully").with_details(
            "\n".join(details)
        )


class WorldCheck(SystemCheck):
    """Checks that the game world can be created, ticked, paused and scaled."""

    name = "World/Simulation"

    def description(self) -> str | None:
        return "Validates game world initialization and simulation tick"

    def check(self) -> CheckResult:
        details: list[str] = []

        def fail(detail: str, message: str) -> CheckResult:
            details.append(detail)
            return CheckResult.failed(message).with_details("\n".join(details))

        world = World()
        details.append("  ✓ World initialized successfully")

        if world.tick_count != 0:
            return fail("  ✗ Initial tick count should be 0", "World initialization failed")
        details.append(f"  ✓ Initial tick count: {world.tick_count}")

        if world.sim_time != 0.0:
            return fail("  ✗ Initial sim time should be 0.0", "World initialization failed")
        details.append(f"  ✓ Initial sim time: {world.sim_time:.2f}s")

        world.tick(0.016)
        if world.tick_count != 1:
            return fail("  ✗ Tick count should increment", "World tick failed")
        details.append(f"  ✓ After tick: count={world.tick_count}")

        world.pause()
        if not world.paused:
            return fail("  ✗ Pause failed", "World pause failed")
        details.append("  ✓ Pause state: working")

        world.resume()
        world.time_scale = 2.0
        if world.time_scale != 2.0:
            return fail("  ✗ Time scale failed", "World time scale failed")
        details.append("  ✓ Time scale: working")

        return CheckResult.passed("All world systems operational").with_details("\n".join(details))


def run_all_checks() -> HealthCheckReport:
    """Run every built-in check and return the report."""
    return (
        HealthCheckRunner()
        .add_check(WorldCheck())
        .add_check(BuildInfoCheck())
        .add_check(SystemInfoCheck())
        .run()
    )