import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    # Options cache and the Supabase client are per-process singletons
    workers = int(os.environ.get("WEB_CONCURRENCY", 1))
    uvicorn.run(
        "dealership.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
    )
