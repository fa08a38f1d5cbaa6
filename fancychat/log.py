import sys
from twisted import logger as log


def observe(log_level=log.LogLevel.info, out=None):
    """
    Starts printing fancychat's log events at or above *log_level* to *out*
    (stdout by default). Returns the observer so it can be removed later
    with :func:`stop_observing`.
    """

    if out is None:
        out = sys.stdout

    # this is just the code to set the log level
    log_level_predicate = log.LogLevelFilterPredicate(defaultLogLevel=log_level)
    observer = log.FilteringLogObserver(
        log.textFileLogObserver(out), [log_level_predicate]
    )
    log.globalLogPublisher.addObserver(observer)
    return observer


def stop_observing(observer):
    log.globalLogPublisher.removeObserver(observer)
