import re

from centerlines.diagnostics import Diagnostic, NON_CONVERGENCE, log_diagnostic
from centerlines.utils.logging import warn_once


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_log_diagnostic(caplog):
    diagnostic = Diagnostic(NON_CONVERGENCE, 'solver gave up early', {'start': (0., 0.)})
    log_diagnostic(diagnostic)
    log_diagnostic(diagnostic)
    assert len(re.findall('solver gave up early', caplog.text)) == 1
    assert 'will not repeat' in caplog.text
