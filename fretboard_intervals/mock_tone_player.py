from .core.interfaces import ITonePlayer


class RecordingTonePlayer(ITonePlayer):
    """A tone player for unit tests. Records plans instead of sounding them."""

    def __init__(self):
        self.plans = []
        self.stopped = False

    def play(self, plan):
        self.plans.append(list(plan))
        self.stopped = False

    def stop(self):
        self.stopped = True
