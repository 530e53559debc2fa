# linux_deps/profiles.py
# -*- coding: utf-8 -*-
"""
Package manager profiles for the supported Linux distribution families.

Each profile names the executable used to detect the package manager, the
arguments for a non-interactive install, and the distribution's spelling of
the native libraries the editor needs to build and run (audio, fonts,
Wayland/X11 keyboard handling, TLS, zstd compression, Vulkan loader).

When adding a dependency, add the equivalent package to every profile.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackageManagerProfile(BaseModel):
    """Fixed association between a package manager and its dependency list."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Short identifier, e.g. 'apt'.")
    distribution: str = Field(description="Distribution family served.")
    detection_command: str = Field(
        description="Executable whose presence selects this profile; also the command invoked."
    )
    install_args: Tuple[str, ...] = Field(
        description="Arguments selecting a non-interactive install."
    )
    packages: Tuple[str, ...] = Field(
        description="Ordered dependency package names."
    )
    requires_escalation: bool = Field(
        default=True,
        description="Whether the install must run through sudo/doas.",
    )

    @field_validator("packages")
    @classmethod
    def _packages_unique(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        duplicates = sorted({pkg for pkg in value if value.count(pkg) > 1})
        if duplicates:
            raise ValueError(f"duplicate packages: {', '.join(duplicates)}")
        if not value:
            raise ValueError("a profile needs at least one package")
        return value

    def command_template(self) -> Tuple[str, ...]:
        """The invocation without escalation prefix."""
        return (self.detection_command, *self.install_args, *self.packages)


# https://packages.ubuntu.com/
APT_PROFILE = PackageManagerProfile(
    name="apt",
    distribution="Debian, Ubuntu and derivatives",
    detection_command="apt-get",
    install_args=("install", "-y"),
    packages=(
        "libasound2-dev",
        "libfontconfig-dev",
        "libwayland-dev",
        "libxkbcommon-x11-dev",
        "libssl-dev",
        "libzstd-dev",
        "vulkan-validationlayers",
        "libvulkan1",
    ),
)

# https://packages.fedoraproject.org/
DNF_PROFILE = PackageManagerProfile(
    name="dnf",
    distribution="Fedora, CentOS, RHEL",
    detection_command="dnf",
    install_args=("install", "-y"),
    packages=(
        "alsa-lib-devel",
        "fontconfig-devel",
        "wayland-devel",
        "libxkbcommon-x11-devel",
        "openssl-devel",
        "libzstd-devel",
        "vulkan-validation-layers",
        "vulkan-loader",
    ),
)

# https://software.opensuse.org/
ZYPPER_PROFILE = PackageManagerProfile(
    name="zypper",
    distribution="openSUSE",
    detection_command="zypper",
    install_args=("install", "-y"),
    packages=(
        "alsa-devel",
        "fontconfig-devel",
        "wayland-devel",
        "libxkbcommon-x11-devel",
        "openssl-devel",
        "libzstd-devel",
        "vulkan-validationlayers",
        "libvulkan1",
    ),
)

# https://archlinux.org/packages/
PACMAN_PROFILE = PackageManagerProfile(
    name="pacman",
    distribution="Arch, Manjaro",
    detection_command="pacman",
    install_args=("-S", "--needed", "--noconfirm"),
    packages=(
        "alsa-lib",
        "fontconfig",
        "wayland",
        "libxkbcommon-x11",
        "openssl",
        "zstd",
        "vulkan-validation-layers",
        "vulkan-icd-loader",
    ),
)

# https://voidlinux.org/packages/
XBPS_PROFILE = PackageManagerProfile(
    name="xbps",
    distribution="Void",
    detection_command="xbps-install",
    install_args=("-Syu",),
    packages=(
        "alsa-lib-devel",
        "fontconfig-devel",
        "libxcb-devel",
        "libxkbcommon-devel",
        "libzstd-devel",
        "openssl-devel",
        "wayland-devel",
        "vulkan-loader",
    ),
)

# Probe order: the first available manager wins.
PROFILES: Tuple[PackageManagerProfile, ...] = (
    APT_PROFILE,
    DNF_PROFILE,
    ZYPPER_PROFILE,
    PACMAN_PROFILE,
    XBPS_PROFILE,
)


def get_profile(name: str) -> Optional[PackageManagerProfile]:
    """Looks up a profile by its short name."""
    for profile in PROFILES:
        if profile.name == name:
            return profile
    return None
