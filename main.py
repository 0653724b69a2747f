"""Main application entry point."""

import os

from eventrecords.config.environment import IS_PRODUCTION_ENVIRONMENT
from eventrecords.api.app import app

if __name__ == "__main__":
    port = int(os.environ.get('PORT', 8000))
    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - use direct app instance for better debugging
        import uvicorn
        uvicorn.run(
            app,  # Direct app instance for development
            host="127.0.0.1",
            port=port,
            log_level="debug"
        )
    else:
        # Production mode - one worker, since the event repository lives in process memory
        import uvicorn
        uvicorn.run(
            "eventrecords.api.app:app",
            host="0.0.0.0",
            port=port,
            reload=False,
            workers=1,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
