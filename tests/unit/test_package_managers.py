"""
Unit tests for package manager detection.
"""

import subprocess

from kickstart.utils import package_managers
from kickstart.utils.package_managers import (
    PackageManagerInfo,
    default_package_manager,
    detect_package_managers,
)

VERSIONS = {"npm": "10.2.0", "yarn": "1.22.19"}


def fake_which(installed):
    return lambda name: f"/usr/bin/{name}" if name in installed else None


def fake_run(args, **kwargs):
    name = args[0].rsplit("/", 1)[-1]
    return subprocess.CompletedProcess(args, 0, stdout=f"{VERSIONS[name]}\n", stderr="")


class TestDetectPackageManagers:
    def test_both_installed_recommends_yarn(self, monkeypatch):
        monkeypatch.setattr(package_managers.shutil, "which", fake_which({"npm", "yarn"}))
        monkeypatch.setattr(package_managers.subprocess, "run", fake_run)

        managers = detect_package_managers()

        assert managers["npm"].available is True
        assert managers["npm"].version == "10.2.0"
        assert managers["npm"].recommended is False
        assert managers["yarn"].recommended is True

    def test_only_npm(self, monkeypatch):
        monkeypatch.setattr(package_managers.shutil, "which", fake_which({"npm"}))
        monkeypatch.setattr(package_managers.subprocess, "run", fake_run)

        managers = detect_package_managers()

        assert managers["npm"].recommended is True
        assert managers["yarn"].available is False
        assert managers["yarn"].error == "Not installed"

    def test_version_command_fails(self, monkeypatch):
        def failing_run(args, **kwargs):
            raise subprocess.CalledProcessError(1, args)

        monkeypatch.setattr(package_managers.shutil, "which", fake_which({"npm"}))
        monkeypatch.setattr(package_managers.subprocess, "run", failing_run)

        managers = detect_package_managers()

        assert managers["npm"].available is False
        assert managers["npm"].error

    def test_version_command_times_out(self, monkeypatch):
        def slow_run(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(package_managers.shutil, "which", fake_which({"yarn"}))
        monkeypatch.setattr(package_managers.subprocess, "run", slow_run)

        managers = detect_package_managers()

        assert managers["yarn"].available is False
        assert "Timed out" in managers["yarn"].error


class TestDefaultPackageManager:
    def test_prefers_npm(self):
        managers = {
            "npm": PackageManagerInfo(available=True),
            "yarn": PackageManagerInfo(available=True, recommended=True),
        }
        assert default_package_manager(managers) == "npm"

    def test_falls_back_to_yarn(self):
        managers = {"npm": PackageManagerInfo(), "yarn": PackageManagerInfo(available=True)}
        assert default_package_manager(managers) == "yarn"

    def test_nothing_installed(self):
        assert default_package_manager({}) == "npm"
