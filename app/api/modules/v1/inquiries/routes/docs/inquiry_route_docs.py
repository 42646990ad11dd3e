_inquiry_example = {
    "id": "3f0c6a52-9d1e-4b7a-a2a4-6c5f1f0d7e21",
    "company_id": "7c1d2e6f-1a2b-4c3d-8e9f-0a1b2c3d4e5f",
    "consultant_id": "0b5a4d3c-8a57-4c44-9d6b-2f0f5b1c9e11",
    "message": "Need ISO 9001 help",
    "timing": "Q3 2026",
    "mode": "remote",
    "status": "sent",
    "created_at": "2026-02-01T10:00:00Z",
    "updated_at": "2026-02-01T10:00:00Z",
}


create_inquiry_responses = {
    201: {
        "description": "Inquiry Sent",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Inquiry Created",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 201,
                            "message": "Inquiry sent successfully",
                            "data": _inquiry_example,
                        },
                    }
                }
            }
        },
    },
    400: {
        "description": "Bad Request - Invalid Inquiry",
        "content": {
            "application/json": {
                "examples": {
                    "empty_message": {
                        "summary": "Empty Message",
                        "value": {
                            "error": "EMPTY_MESSAGE",
                            "message": "Message cannot be empty",
                            "status_code": 400,
                            "errors": {"message": ["Message cannot be empty"]},
                        },
                    },
                    "invalid_mode": {
                        "summary": "Invalid Mode",
                        "value": {
                            "error": "INVALID_MODE",
                            "message": "Mode must be one of: remote, hybrid, onsite",
                            "status_code": 400,
                            "errors": {"mode": ["Mode must be one of: remote, hybrid, onsite"]},
                        },
                    },
                }
            }
        },
    },
    403: {
        "description": "Forbidden - Caller Is Not a Company",
        "content": {
            "application/json": {
                "examples": {
                    "forbidden": {
                        "summary": "Not a Company",
                        "value": {
                            "error": "FORBIDDEN",
                            "message": "Only companies can send inquiries",
                            "status_code": 403,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}


list_inquiries_responses = {
    200: {
        "description": "Inquiries Visible to the Caller",
        "content": {
            "application/json": {
                "examples": {
                    "company": {
                        "summary": "Company View",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 200,
                            "message": "Inquiries retrieved successfully",
                            "data": {
                                "inquiries": [
                                    {
                                        **_inquiry_example,
                                        "company": None,
                                        "consultant": {
                                            "id": "0b5a4d3c-8a57-4c44-9d6b-2f0f5b1c9e11",
                                            "name": "Quality Partners Ltd",
                                            "email": "hello@qualitypartners.com",
                                            "headline": "Lead auditor for ISO 9001",
                                            "verified": True,
                                        },
                                    }
                                ],
                                "total": 1,
                            },
                        },
                    }
                }
            }
        },
    },
}


update_inquiry_status_responses = {
    200: {
        "description": "Inquiry Status Updated",
        "content": {
            "application/json": {
                "examples": {
                    "accepted": {
                        "summary": "Inquiry Accepted",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 200,
                            "message": "Inquiry status updated successfully",
                            "data": {**_inquiry_example, "status": "accepted"},
                        },
                    }
                }
            }
        },
    },
    400: {
        "description": "Bad Request - Unknown Status",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_status": {
                        "summary": "Invalid Status",
                        "value": {
                            "error": "INVALID_STATUS",
                            "message": "Status must be one of: accepted, declined, closed",
                            "status_code": 400,
                            "errors": {
                                "status": ["Status must be one of: accepted, declined, closed"]
                            },
                        },
                    }
                }
            }
        },
    },
    403: {
        "description": "Forbidden - Caller May Not Request This Status",
        "content": {
            "application/json": {
                "examples": {
                    "forbidden": {
                        "summary": "Not Allowed",
                        "value": {
                            "error": "FORBIDDEN",
                            "message": "You are not allowed to perform this action",
                            "status_code": 403,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
    404: {
        "description": "Not Found",
        "content": {
            "application/json": {
                "examples": {
                    "not_found": {
                        "summary": "Inquiry Not Found",
                        "value": {
                            "error": "NOT_FOUND",
                            "message": "Inquiry not found",
                            "status_code": 404,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
    409: {
        "description": "Conflict - Status Cannot Change Now",
        "content": {
            "application/json": {
                "examples": {
                    "illegal_transition": {
                        "summary": "Illegal Transition",
                        "value": {
                            "error": "ILLEGAL_TRANSITION",
                            "message": "Inquiry status cannot be changed now",
                            "status_code": 409,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}
