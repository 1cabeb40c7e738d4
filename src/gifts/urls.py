GIFTS_BY_EVENT_URL = "/api/v1/gifts/{event}"
RESERVE_GIFT_URL = "/api/v1/gifts/reserve"
MARK_PURCHASED_URL = "/api/v1/gifts/mark-purchased"
CANCEL_RESERVATION_URL = "/api/v1/gifts/cancel-reservation"
