class PktmonNotFoundError(Exception):
    pass

class PktmonCommandError(Exception):
    pass

class CaptureFileNotFoundError(Exception):
    pass
