from typing import List, Optional
from importlib import import_module

from core.config import Settings
from core.logging import get_logger
from core.types import AssessmentModule

logger = get_logger(__name__)


def load_enabled_modules(settings: Optional[Settings] = None) -> List[AssessmentModule]:
    settings = settings or Settings.load()
    mods = []
    for name in settings.enabled_modules():
        mod = import_module(f"modules.{name}.{name}")
        mods.append(mod)
    logger.info(f"Loaded assessment modules: {', '.join(m.id.value for m in mods)}")
    return mods
