class PublicValues:

    def __init__(self, y1: int, y2: int):
        self.y1 = y1
        self.y2 = y2

    def __repr__(self):
        return f"PublicValues(y1={self.y1}, y2={self.y2})"


class Commitment:

    def __init__(self, r1: int, r2: int):
        self.r1 = r1
        self.r2 = r2

    def __repr__(self):
        return f"Commitment(r1={self.r1}, r2={self.r2})"


class Transcript:
    """Everything exchanged during one proof session. Never holds x or k."""

    def __init__(self, public_values: PublicValues, commitment: Commitment, challenge: int, response: int):
        self.public_values = public_values
        self.commitment = commitment
        self.challenge = challenge
        self.response = response

    def __repr__(self):
        return (f"Transcript(y1={self.public_values.y1}, y2={self.public_values.y2}, "
                f"r1={self.commitment.r1}, r2={self.commitment.r2}, c={self.challenge}, s={self.response})")
