import sys

class Raise():
    @classmethod
    def error(cls, msg):
        print("Error:", msg)
        sys.exit(1)

    @classmethod
    def notice(cls, msg):
        print("Note:", msg)
