from zope.interface import Interface

# These interfaces are private: they mark the collaborators that the
# runner and the CLI are wired together with.


class IReporter(Interface):
    def add(record):
        pass

    def records():
        pass


class ITiming(Interface):
    pass
