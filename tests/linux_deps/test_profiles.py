# tests/linux_deps/test_profiles.py
# -*- coding: utf-8 -*-
"""
Tests for the package manager profile table.
"""

import pytest
from pydantic import ValidationError

from linux_deps.profiles import (
    APT_PROFILE,
    PACMAN_PROFILE,
    PROFILES,
    XBPS_PROFILE,
    PackageManagerProfile,
    get_profile,
)


def test_five_profiles_in_priority_order():
    assert [p.detection_command for p in PROFILES] == [
        "apt-get",
        "dnf",
        "zypper",
        "pacman",
        "xbps-install",
    ]


@pytest.mark.parametrize("profile", PROFILES, ids=lambda p: p.name)
def test_profile_packages_are_unique_and_non_empty(profile):
    assert profile.packages
    assert len(set(profile.packages)) == len(profile.packages)


@pytest.mark.parametrize("profile", PROFILES, ids=lambda p: p.name)
def test_every_profile_covers_the_same_number_of_libraries(profile):
    # One package per native library, spelled the distribution's way.
    assert len(profile.packages) == len(APT_PROFILE.packages)


def test_no_package_list_is_shared_between_profiles():
    package_lists = [p.packages for p in PROFILES]
    assert len(set(package_lists)) == len(PROFILES)


AUTO_CONFIRM_FLAGS = {
    "apt": "-y",
    "dnf": "-y",
    "zypper": "-y",
    "pacman": "--noconfirm",
    # xbps-install bundles -y into its short-option cluster.
    "xbps": "-Syu",
}


@pytest.mark.parametrize("profile", PROFILES, ids=lambda p: p.name)
def test_install_args_are_non_interactive(profile):
    assert AUTO_CONFIRM_FLAGS[profile.name] in profile.install_args


def test_xbps_short_options_include_yes():
    cluster = XBPS_PROFILE.install_args[0]

    assert cluster.startswith("-") and not cluster.startswith("--")
    assert "y" in cluster[1:]


def test_command_template_orders_command_args_then_packages():
    template = PACMAN_PROFILE.command_template()

    assert template[:4] == ("pacman", "-S", "--needed", "--noconfirm")
    assert template[4:] == PACMAN_PROFILE.packages


def test_xbps_template():
    assert XBPS_PROFILE.command_template()[:2] == ("xbps-install", "-Syu")


def test_profiles_are_immutable():
    with pytest.raises(ValidationError):
        APT_PROFILE.name = "other"


def test_duplicate_packages_are_rejected():
    with pytest.raises(ValidationError, match="duplicate packages: zstd"):
        PackageManagerProfile(
            name="dup",
            distribution="Test",
            detection_command="dup-get",
            install_args=("install",),
            packages=("zstd", "openssl", "zstd"),
        )


def test_empty_package_list_is_rejected():
    with pytest.raises(ValidationError):
        PackageManagerProfile(
            name="empty",
            distribution="Test",
            detection_command="empty-get",
            install_args=("install",),
            packages=(),
        )


def test_get_profile():
    assert get_profile("apt") is APT_PROFILE
    assert get_profile("emerge") is None
