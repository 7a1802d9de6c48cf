import configparser
import pathlib


_root = pathlib.Path(__file__).resolve().parent.parent


def get_path(relpath):
    ''' Get absolute path to a project-relative path. '''
    return _root / relpath


def get_config():
    '''
    Read the application configuration from the standard configuration files.

    ``local.ini`` is read after ``system.ini``, so its values win. Missing
    files are skipped.

    :rtype: ConfigParser
    '''
    config_dir = get_path("conf")
    config_files = [
        config_dir / "system.ini",
        config_dir / "local.ini",
    ]
    config = configparser.ConfigParser()
    config.optionxform = str
    config.read(config_files)
    return config


class ItemDefaults:
    ''' Values used for item flags that a document does not set. '''

    def __init__(self, safe=False, cdata=False, realtime=False):
        '''
        Constructor.

        :param bool safe: Skip the changefreq and priority range checks.
        :param bool cdata: Write ``loc`` without escaping it.
        :param bool realtime: Include the time of day in ``lastmod``.
        '''
        self.safe = safe
        self.cdata = cdata
        self.realtime = realtime

    @classmethod
    def from_config(cls, config):
        '''
        Read defaults from the ``[item]`` section of ``config``.

        :param ConfigParser config:
        :rtype: ItemDefaults
        '''
        return cls(
            safe=config.getboolean('item', 'safe', fallback=False),
            cdata=config.getboolean('item', 'cdata', fallback=False),
            realtime=config.getboolean('item', 'lastmodrealtime',
                fallback=False),
        )
