ADMIN_PAGE_URL = "/admin"
CREATE_EVENT_URL = "/admin/create-event"
DELETE_GUEST_URL = "/admin/delete-guest"
