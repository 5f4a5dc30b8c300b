"""TRACE log level for symlayer.

The modifiers and layer toggles change state on nearly every key event.
Those transitions go to TRACE (5), below DEBUG, so that ``--debug`` shows
layer toggles and syllable commits without the per-key noise.

Importing this module registers the level name and adds ``trace()`` to
every :class:`logging.Logger`:

    import symlayer.log
    logger = logging.getLogger(__name__)
    logger.trace("shift: up, one_shot=%s", armed)
"""

import logging

TRACE = 5


def trace(logger, msg, *args, **kwargs):
    """Log *msg* at TRACE on *logger*, reporting the caller's location."""
    # one extra frame: this function sits between the caller and Logger.log
    kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 1
    logger.log(TRACE, msg, *args, **kwargs)


if logging.getLevelName(TRACE) != "TRACE":
    logging.addLevelName(TRACE, "TRACE")

if not hasattr(logging.Logger, 'trace'):
    logging.Logger.trace = trace  # type: ignore[attr-defined]
