import sys

from loguru import logger

from members.config import get_settings

# Flag to track if logging has been configured
_logging_configured = False

LOG_FORMAT = (
	"<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
	"<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level=None, quiet=None, force=False):
	"""
	Configures the global logger.

	Args:
		level: Console log level. If None, use MEMBERS__LOG_LEVEL.
		quiet: If True, drop the console sink. If None, use MEMBERS__QUIET.
		force: Reconfigure even if logging was already set up.
	"""
	global _logging_configured

	if _logging_configured and not force:
		return
	_logging_configured = True

	settings = get_settings()
	if level is None:
		level = settings.log_level
	if quiet is None:
		quiet = settings.quiet

	logger.remove()
	if not quiet:
		logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True)


setup_logging()
