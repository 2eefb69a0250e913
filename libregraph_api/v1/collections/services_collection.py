class ServicesCollection(object):
    def __init__(self, client, prefix):
        self.client = client
        self.prefix = prefix
