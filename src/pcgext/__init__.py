"""pcgext — reproducible random values from an extended PCG engine."""

__version__ = "0.1.0"

from pcgext.config.defaults import default_seed_config as default_seed_config
from pcgext.config.schema import SeedConfig as SeedConfig
from pcgext.core.base import BaseSeed as BaseSeed
from pcgext.core.extended import ExtendedSeed as ExtendedSeed
from pcgext.core.extended import independent_seed as independent_seed
from pcgext.core.extended import initial_seed as initial_seed
from pcgext.core.extended import seed_from_config as seed_from_config
from pcgext.core.generator import Config as Config
from pcgext.core.generator import Generator as Generator
from pcgext.core.generator import make_config as make_config
from pcgext.core.generator import step as step
from pcgext.io.serialize import dump_seed as dump_seed
from pcgext.io.serialize import from_portable as from_portable
from pcgext.io.serialize import load_seed as load_seed
from pcgext.io.serialize import to_portable as to_portable
from pcgext.utils.exceptions import ConfigError as ConfigError
from pcgext.utils.exceptions import DecodeError as DecodeError
from pcgext.utils.exceptions import PcgError as PcgError
