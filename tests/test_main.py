import unittest
from unittest.mock import patch, MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_booking.__main__ import run


class TestRun(unittest.TestCase):

    @patch('event_booking.__main__.ensure_indexes')
    def test_run_creates_indexes_and_disconnects(self, mock_ensure_indexes):
        mock_connection = MagicMock()
        mock_db = mock_connection.connect.return_value
        mock_db.__getitem__.return_value.estimated_document_count.return_value = 3

        run(mock_connection)

        mock_connection.connect.assert_called_once()
        mock_ensure_indexes.assert_called_once_with(mock_connection)
        mock_connection.disconnect.assert_called_once()

    @patch('event_booking.__main__.ensure_indexes')
    def test_run_disconnects_on_failure(self, mock_ensure_indexes):
        mock_connection = MagicMock()
        mock_ensure_indexes.side_effect = RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            run(mock_connection)

        mock_connection.disconnect.assert_called_once()


if __name__ == '__main__':
    unittest.main()
