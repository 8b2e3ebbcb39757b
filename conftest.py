from idlcodec.utils.log import LoggingOutput, setup_logging

setup_logging(logging_output=LoggingOutput.PRETTY)
