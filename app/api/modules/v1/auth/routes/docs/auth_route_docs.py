# SIGNUP DOCS
signup_responses = {
    201: {
        "description": "Account Created Successfully",
        "content": {
            "application/json": {
                "examples": {
                    "consultant": {
                        "summary": "Consultant Registered",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 201,
                            "message": "Account created successfully",
                            "data": {
                                "user": {
                                    "id": "0b5a4d3c-8a57-4c44-9d6b-2f0f5b1c9e11",
                                    "email": "hello@qualitypartners.com",
                                    "name": "Quality Partners Ltd",
                                    "role": "consultant",
                                    "created_at": "2026-01-12T09:30:00Z",
                                }
                            },
                        },
                    }
                }
            }
        },
    },
    409: {
        "description": "Conflict - Email Already Registered",
        "content": {
            "application/json": {
                "examples": {
                    "duplicate": {
                        "summary": "Duplicate Account",
                        "value": {
                            "error": "DUPLICATE_ACCOUNT",
                            "message": "User already exists with this email",
                            "status_code": 409,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
    500: {
        "description": "Signup Failed - Partial Records Removed",
        "content": {
            "application/json": {
                "examples": {
                    "signup_failed": {
                        "summary": "Signup Failed",
                        "value": {
                            "error": "SIGNUP_FAILED",
                            "message": "Account could not be created. Please try again later.",
                            "status_code": 500,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}


# LOGIN DOCS
login_responses = {
    200: {
        "description": "Login Successful",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Token Issued",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 200,
                            "message": "Login successful",
                            "data": {
                                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                                "token_type": "bearer",
                                "expires_in": 86400,
                                "user": {
                                    "id": "7c1d2e6f-1a2b-4c3d-8e9f-0a1b2c3d4e5f",
                                    "email": "ops@acme.com",
                                    "name": "Acme Manufacturing",
                                    "role": "company",
                                    "created_at": "2026-01-10T08:00:00Z",
                                },
                            },
                        },
                    }
                }
            }
        },
    },
    401: {
        "description": "Unauthorized - Invalid Credentials",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_credentials": {
                        "summary": "Invalid Credentials",
                        "value": {
                            "error": "UNAUTHENTICATED",
                            "message": "Invalid email or password",
                            "status_code": 401,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}


# ME DOCS
me_responses = {
    200: {
        "description": "Caller Identity",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Identity Retrieved",
                        "value": {
                            "status": "SUCCESS",
                            "status_code": 200,
                            "message": "Identity retrieved successfully",
                            "data": {
                                "id": "7c1d2e6f-1a2b-4c3d-8e9f-0a1b2c3d4e5f",
                                "role": "company",
                                "name": "Acme Manufacturing",
                                "email": "ops@acme.com",
                            },
                        },
                    }
                }
            }
        },
    },
    401: {
        "description": "Unauthorized - Missing or Invalid Token",
        "content": {
            "application/json": {
                "examples": {
                    "unauthenticated": {
                        "summary": "Not Authenticated",
                        "value": {
                            "error": "HTTP_ERROR",
                            "message": "Authentication required",
                            "status_code": 401,
                            "errors": {},
                        },
                    }
                }
            }
        },
    },
}
