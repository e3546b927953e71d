# SPDX-License-Identifier: MIT
"""Cordova platform and sub-platform definitions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

PLATFORM_ID = "cordova"
PLATFORM_NAME = "Cordova Platform"

# Name of the Cordova CLI executable (".cmd" is appended on Windows)
CORDOVA_TOOL = "cordova"

# Hosted web app plugin; needs updating if the plugin is relocated
HOSTED_WEBAPP_PLUGIN = "cordova-plugin-hostedwebapp@>=0.2.0 <0.3.0"
HOSTED_WEBAPP_PLUGIN_ENV = "HWA_CORDOVA_PLUGIN"

CROSSWALK_PLUGIN = "cordova-plugin-crosswalk-webview"
WEB_APP_TOOLKIT_PLUGIN = "cordova-plugin-webapptoolkit"
WEB_APP_TOOLKIT_URL = "https://github.com/manifoldjs/Web-App-ToolKit"

# Pinned until a cordova-ios release unblocks automated plugin installs
# (CB-9232, CB-916)
WHITELIST_PLUGIN = "cordova-plugin-whitelist@1.0.0"

GENERATION_INFO_FILENAME = "generationInfo.json"


@dataclass(frozen=True)
class SubPlatform:
    """A mobile OS target generated within the Cordova project.

    Attributes:
        id: Cordova platform identifier
        name: Display name
        shortcut: Whether a top-level shortcut to the platform folder is created
        build_host: sys.platform value required to package, or None for any host
        run_host: sys.platform value required to run, or None for any host
        open_host: sys.platform value required to open the IDE project
        ide_project: IDE project file relative to the platform folder
    """

    id: str
    name: str
    shortcut: bool = True
    build_host: str | None = None
    run_host: str | None = None
    open_host: str | None = None
    ide_project: str | None = None


ANDROID = SubPlatform(id="android", name="Android Platform")
IOS = SubPlatform(id="ios", name="iOS Platform", build_host="darwin")
# Windows gets no shortcut: its Visual Studio solution lives in the platform folder
WINDOWS = SubPlatform(
    id="windows",
    name="Windows Platform",
    shortcut=False,
    run_host="win32",
    open_host="win32",
    ide_project="CordovaApp.sln",
)

SUB_PLATFORMS: dict[str, SubPlatform] = {p.id: p for p in (ANDROID, IOS, WINDOWS)}


def hosted_webapp_plugin(environ: Mapping[str, str] | None = None) -> str:
    """Get the hosted web app plugin specifier, honoring the environment override."""
    env = os.environ if environ is None else environ
    return env.get(HOSTED_WEBAPP_PLUGIN_ENV) or HOSTED_WEBAPP_PLUGIN
