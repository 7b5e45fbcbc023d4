"""
Logging for teedata
Each module decorates a standard 'logging' logger with %-style formatting and verify()/throw().
"""

from .util import _fmt
import sys as sys
import os as os
import logging as logging
import traceback as traceback
import datetime as datetime
import tempfile as tempfile

class Logger(object):
    """
    Module logger. Create one per module with

        _log = Logger(__file__)

    and use

        _log.debug( "Created %s", name )
        _log.verify( isinstance(data, Mapping), "'data' must be a Mapping. Found type %s", type(data).__name__ )

    verify() and throw() log an error and raise LogException regardless of the logging level.
    """

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    DEBUG = logging.DEBUG

    def __init__(self,topic : str):
        assert topic !="", "Logger cannot be empty"
        setupAppLogging()
        self.logger = logging.getLogger(os.path.basename(topic) or topic)

    class LogException(Exception):
        """ Raised by verify() and throw(). The message has already been logged """
        pass

    def Exceptn(self, text : str, *args, **kwargs ):
        """
        Logs 'text' % args as an error and returns a LogException to raise.
        When called while another exception is handled, its message is appended, and at
        warning level or below its trace as well. A LogException in flight is returned as is.
        """
        text = _fmt(text,args,kwargs)
        (typ, val, trc) = sys.exc_info()
        if typ is Logger.LogException:
            return val
        if not typ is None:
            text += (" " if text[-1:] == "." else ". ") + str(val)
            if self.logger.getEffectiveLevel() <= logging.WARNING:
                text = text.rstrip() + "".join( "\n  " + t.rstrip("\n") for t in traceback.format_exception(typ,val,trc,limit = 100) )
        self.error( text )
        return Logger.LogException("*** LogException: " + text)

    def debug(self, text, *args, **kwargs ):
        if self.logger.isEnabledFor(logging.DEBUG) and len(text) > 0:
            self.logger.debug(_fmt(text,args,kwargs))

    def error(self, text, *args, **kwargs ):
        if self.logger.isEnabledFor(logging.ERROR) and len(text) > 0:
            self.logger.error(_fmt(text,args,kwargs))

    def throw( self, text, *args, **kwargs ):
        raise self.Exceptn(text,*args,**kwargs)

    def verify(self, cond, text, *args, **kwargs ):
        """ Raises LogException with 'text' % args unless 'cond' holds """
        if not cond:
            self.throw(text,*args,**kwargs)

    def setLevel(self, level):
        self.logger.setLevel(level)

# one stdout and one temp file handler on the root logger per process
GLOBAL_LOG_DATA = "teedata.logger"

logFileName = None

def setupAppLogging( levelPrint = logging.ERROR, levelFile = logging.WARNING ):
    """
    Installs a stdout handler at 'levelPrint' and a log file 'teedata_<stamp>_<pid>.log' in the
    temp directory at 'levelFile'. Only the first call has an effect; every call returns the
    dictionary of installed handlers.
    """
    data = globals().get(GLOBAL_LOG_DATA,None)
    if data is None:
        root   = logging.getLogger()
        fmtt   = logging.Formatter(fmt="%(asctime)s %(levelname)-10s: %(message)s")
        stdOut = logging.StreamHandler(sys.stdout)
        stdOut.setFormatter(fmtt)
        stdOut.setLevel(levelPrint)
        root.addHandler(stdOut)
        if root.level == logging.NOTSET or root.level > min(levelPrint,levelFile):
            root.setLevel(min(levelPrint,levelFile))

        stamp   = datetime.datetime.now().strftime("%Y-%m-%d_%H%M%S")
        logFile = os.path.join(tempfile.gettempdir(), "teedata_%s_%d.log" % (stamp, os.getpid()))
        try:
            fileE = logging.FileHandler(logFile, delay=True)
        except OSError:
            data = {'strm':stdOut}
        else:
            fileE.setFormatter(fmtt)
            fileE.setLevel(levelFile)
            root.addHandler(fileE)
            data = {'strm':stdOut, 'file':fileE, 'logFileName':logFile}
        globals()[GLOBAL_LOG_DATA] = data

    global logFileName
    logFileName = data.get('logFileName', None)
    return data
