"""
Path configuration steps.

Configurators wire the resolved dependency root into later build steps:
- ScriptConfigurator: runs set_ax_root.sh with the root path
- NullConfigurator: skips configuration (--no-configure)
"""
from axroot.configurators.base import PathConfigurator, NullConfigurator
from axroot.configurators.script import ScriptConfigurator

__all__ = ["PathConfigurator", "NullConfigurator", "ScriptConfigurator"]
