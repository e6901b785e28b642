import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logger(app=None, log_level=None, log_dir='logs'):
    if log_level is None:
        log_level = logging.INFO

    #NOTE: app.logger 와 서비스 로거(vidtube.*) 모두 같은 핸들러를 사용
    logger = logging.getLogger('vidtube')
    logger.setLevel(log_level)

    if app:
        app.logger.setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s in %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if app is not None and app.config.get('TESTING'):
        return logger

    #NOTE: 파일 핸들러 - 10MB 단위로 로테이션, 최대 5개 파일
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path / 'vidtube.log',
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        log_path / 'error.log',
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(error_handler)

    return logger


def get_logger(name=None):
    if name:
        return logging.getLogger(f'vidtube.{name}')
    return logging.getLogger('vidtube')
