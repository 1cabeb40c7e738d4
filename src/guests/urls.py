CONFIRM_RSVP_URL = "/api/v1/rsvp/{event}"
LIST_RSVPS_URL = "/api/v1/rsvp/{event}/list"
