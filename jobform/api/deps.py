from fastapi import Request

from jobform.services.application_service import ApplicationController


def get_controller(request: Request) -> ApplicationController:
    return request.app.state.controller
