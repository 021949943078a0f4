import logging

from geotransforms.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name == 'tests.utils.test_mixins.Foo'
    assert Foo('child').logger.name == 'tests.utils.test_mixins.Foo.child'


def test_logger_emits(caplog):
    caplog.set_level(logging.DEBUG, logger='tests.utils.test_mixins.Foo')
    Foo().logger.debug('mixin %s', 'test')
    assert 'mixin test' in caplog.text
