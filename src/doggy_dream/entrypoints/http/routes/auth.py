from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse

from doggy_dream.entrypoints.http.dependencies import get_login_use_case
from doggy_dream.entrypoints.http.error_responses import ErrorResponse
from doggy_dream.use_cases.login import Login, LoginRequest


router = APIRouter(tags=["Auth"])


@router.post(
    "/auth",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Log in to the dog catalog",
    description="""
    Forwards name and email to the upstream service and relays its session
    cookies to the browser, then redirects to `/search`.
    """,
    responses={
        401: {"model": ErrorResponse, "description": "Upstream refused the login"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def login(
    name: str = Form(...),
    email: str = Form(...),
    use_case: Login = Depends(get_login_use_case),
) -> RedirectResponse:
    result = await use_case.execute(LoginRequest(name=name, email=email))

    response = RedirectResponse(url="/search", status_code=status.HTTP_303_SEE_OTHER)
    for cookie in result.set_cookies:
        response.headers.append("set-cookie", cookie)
    return response
