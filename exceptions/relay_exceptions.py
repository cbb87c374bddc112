class RelayError(Exception):
    pass


class InvalidEventRequest(RelayError):
    def __init__(self, missing=(), invalid=()):
        self.missing = list(missing)
        self.invalid = list(invalid)
        problems = []
        if self.missing:
            problems.append(f"Missing required fields: {', '.join(self.missing)}")
        if self.invalid:
            problems.append(f"Fields must be UTF-8 text: {', '.join(self.invalid)}")
        super().__init__("; ".join(problems))


class DeliveryTransportError(RelayError):
    """
    The outbound request never produced a response from the destination
    (DNS or connection failure, timeout, invalid URL, broken response).
    """
    def __init__(self, address, detail):
        self.address = address
        self.detail = detail
        super().__init__(f"Webhook delivery to {address} failed: {detail}")


class LabelDumpError(RelayError):
    pass
