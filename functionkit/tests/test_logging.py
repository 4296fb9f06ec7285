from functionkit import Function, pipeline
from functionkit.logging import FunctionKitLogger, log_to_stream
import io
import json
import logging
import unittest


class TestFunctionKitLogger(unittest.TestCase):
    def setUp(self) -> None:
        self.stream = io.StringIO()
        self.handler = log_to_stream(self.stream)

    def tearDown(self) -> None:
        package_logger = logging.getLogger('functionkit')
        package_logger.removeHandler(self.handler)
        package_logger.setLevel(logging.NOTSET)

    def _records(self) -> list:
        return [
            json.loads(line) for line in self.stream.getvalue().splitlines()
        ]

    def test_str_format_syntax(self) -> None:
        logger = FunctionKitLogger(logging.getLogger('functionkit.test'))
        logger.info('{} and {name}', 'positional', name='keyword')
        [record] = self._records()
        self.assertEqual('positional and keyword', record['message'])
        self.assertEqual('INFO', record['level_name'])
        self.assertEqual('test_str_format_syntax', record['function_name'])
        self.assertEqual(__name__, record['module'])

    def test_curried_logs_construction(self) -> None:
        Function(lambda pair: pair).curried(3)
        [record] = self._records()
        self.assertEqual('functionkit.function', record['name'])
        self.assertIn('over 3 arguments', record['message'])
        self.assertEqual('DEBUG', record['level_name'])

    def test_apply_does_not_log(self) -> None:
        f = pipeline(abs, str)
        self.stream.truncate(0)
        self.stream.seek(0)
        f.apply(-3)
        self.assertEqual('', self.stream.getvalue())

    def test_exception_info(self) -> None:
        logger = FunctionKitLogger(logging.getLogger('functionkit.test'))
        try:
            raise RuntimeError('broken')
        except RuntimeError as e:
            logger.error('failed: {}', e, exc_info=True)
        [record] = self._records()
        self.assertEqual('failed: broken', record['message'])
        self.assertIn('RuntimeError: broken\n', record['exception'][-1])

    def test_disabled_level_is_not_formatted(self) -> None:
        class Exploding:
            def __format__(self, spec: str) -> str:
                raise AssertionError('formatted')

        logger = FunctionKitLogger(logging.getLogger('functionkit.test'))
        logging.getLogger('functionkit').setLevel(logging.WARNING)
        logger.debug('{}', Exploding())
        self.assertEqual([], self._records())
