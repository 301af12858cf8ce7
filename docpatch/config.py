import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'docpatch_config'


class DocpatchConfigurable(HasTraits):
    """Base of the groups of configurable options.

    Each group is a section of docpatch_config.json, e.g.
    {"Diff": {"id_aware": true}}.
    """

    def configured_traits(self, cls):
        "Current values of the config traits defined on cls itself."
        return {name: getattr(self, name) for name in cls.class_own_traits(config=True)}


_config_cache = {}
def config_instance(cls):
    if cls not in _config_cache:
        _config_cache[cls] = cls()
    return _config_cache[cls]


def config_search_path():
    "Directories searched for config files, highest priority first."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def load_disk_config(include_none=False):
    """Merge the config files found on the search path into one dict.

    Files found earlier on the search path take precedence.
    """
    disk_config = {}
    for directory in reversed(config_search_path()):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        recursive_update(disk_config, config, include_none)
    return disk_config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys, unless include_none is set.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            sub = target.setdefault(k, {})
            recursive_update(sub, v, include_none)
            if not include_none and not sub:
                # Prune empty subdicts
                del target[k]
        elif v is None and not include_none:
            target.pop(k, None)
        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    """Return the flat dict of option values for an entrypoint.

    These are the defaults of each option group the entrypoint uses,
    overridden by the section of the same name in the config files.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        )) from None

    disk_config = load_disk_config(include_none)
    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, DocpatchConfigurable):
            continue
        recursive_update(config, config_instance(cls).configured_traits(cls), include_none)
        if cls.__name__ in disk_config:
            recursive_update(config, disk_config[cls.__name__], include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DocpatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Show(DocpatchConfigurable):

    use_color = Bool(
        True,
        help="use ANSI color code escapes for text output.",
    ).tag(config=True)


class Diff(DocpatchConfigurable):

    id_aware = Bool(
        False,
        help="match array items that are objects with equal ids, and diff "
             "them in place instead of removing and adding them.",
    ).tag(config=True)

    id_key = Unicode(
        'id',
        help="the object member holding the id used by id_aware.",
    ).tag(config=True)


class Patch(DocpatchConfigurable):

    strict = Bool(
        False,
        help="fail on writes to locations that can't be reached, instead "
             "of skipping them.",
    ).tag(config=True)


class DocDiff(Global, Diff, Show):
    pass

class DocApply(Global, Patch, Show):
    pass

class DocShow(Global, Show):
    pass


entrypoint_configurables = {
    'docpatch-diff': DocDiff,
    'docpatch-apply': DocApply,
    'docpatch-show': DocShow,
}
