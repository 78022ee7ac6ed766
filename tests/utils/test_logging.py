
import re

from zgdist.utils.logging import reset_warnings, warn_once


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_reset_warnings(caplog):
    warn_once('repeatable')
    reset_warnings()
    warn_once('repeatable')
    assert len(re.findall('repeatable', caplog.text)) == 2
