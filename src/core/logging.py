import logging

# 요청 단위 로그가 너무 많은 외부 라이브러리
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO", debug: bool = False):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if not debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
