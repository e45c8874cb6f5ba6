class EventFields:
    """MongoDB field names for events collection"""

    MONGO_ID = "_id"

    USER_ID = "user_id"
    TIMESTAMP = "timestamp"

    TYPE = "type"
    LOCATION = "location"
    SEVERITY = "severity"
    STATUS = "status"

    IMAGE = "image"
