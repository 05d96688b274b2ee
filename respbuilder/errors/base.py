class RespbuilderError(Exception):
    ...
