import logging as pylog

from slopeone.utils import logging


class TestLogging:

    def test_init_with_packaged_config(self, tmp_path):
        logging.init(folder_log=str(tmp_path / 'log'), log_level=pylog.INFO)

        logger = logging.get_logger("__main__", pylog.INFO)
        logger.info("hello")

        assert (tmp_path / 'log' / 'slopeone.log').exists()
        assert logger.level == pylog.INFO

    def test_prepare_logger(self, tmp_path):
        logger = logging.prepare_logger("SlopeOneTest", str(tmp_path))
        logger.info("trained")
        for handler in logger.handlers:
            handler.flush()

        files = list(tmp_path.glob("SlopeOneTest-*.log"))
        assert len(files) == 1
        assert "trained" in files[0].read_text()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
