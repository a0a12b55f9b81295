import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from terminal_ledger.config import settings
from terminal_ledger.bookings.router import router as bookings_router
from terminal_ledger.reports.router import router as reports_router
from terminal_ledger.routes.router import router as routes_router
from terminal_ledger.terminal.router import router as terminal_router
from terminal_ledger.vehicles.router import router as vehicles_router
from terminal_ledger.vouchers.router import router as vouchers_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Seat booking, vouchers and trip revenue for a transport terminal",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(
    terminal_router,
    prefix=f"{settings.API_V1_STR}/terminal",
    tags=["Terminal"]
)

app.include_router(
    vehicles_router,
    prefix=f"{settings.API_V1_STR}/vehicles",
    tags=["Vehicles"]
)

app.include_router(
    routes_router,
    prefix=f"{settings.API_V1_STR}/routes",
    tags=["Routes & Fares"]
)

app.include_router(
    vouchers_router,
    prefix=f"{settings.API_V1_STR}/vouchers",
    tags=["Vouchers"]
)

app.include_router(
    bookings_router,
    prefix=f"{settings.API_V1_STR}/vouchers",
    tags=["Booking & Ticketing"]
)

app.include_router(
    reports_router,
    prefix=f"{settings.API_V1_STR}/reports",
    tags=["Reports"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
