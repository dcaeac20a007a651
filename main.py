from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from config import Settings, load_settings
from contact import handle_submission
from contact_form import form_context, templates
from mailer import Mailer, ResendMailer

# Load settings once; every request receives them through get_settings
settings = load_settings()

app = FastAPI(title="Contact Form API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Dependencies ---
def get_settings() -> Settings:
    return settings


def get_mailer(current: Settings = Depends(get_settings)) -> Mailer:
    return ResendMailer(current.resend_api_key or "")


# --- Health Check Endpoints ---
@app.get("/")
async def root():
    return {"status": "ok", "message": "Contact Form API"}


@app.get("/health")
async def health_check(current: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "email_provider": "configured" if current.resend_api_key else "missing",
        "contact_email": "configured" if current.contact_email else "missing",
    }


# ==================== CONTACT FORM ENDPOINTS ====================

@app.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request):
    """Render the contact form"""
    return templates.TemplateResponse(request, "contact_form.html", form_context())


@app.post("/api/contact")
async def send_contact_form(
    request: Request,
    current: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
):
    """
    📧 SEND CONTACT FORM EMAIL
    Validates the submission and relays it to CONTACT_EMAIL via Resend.
    The raw body is read here so configuration is checked before parsing.
    """
    raw_body = await request.body()
    result = await handle_submission(raw_body, current, mailer)
    return JSONResponse(status_code=result.status_code, content=result.body)


if __name__ == "__main__":
    import uvicorn

    print("🚀 Starting Contact Form Backend...")
    print(f"🌐 Server: http://{settings.host}:{settings.port}")
    print(f"📖 Docs: http://{settings.host}:{settings.port}/docs")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info"
    )
