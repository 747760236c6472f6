import logging
import os
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .config.settings import Config
from .data.test_cases import ALL_CASES, select_cases
from .models.test_case import Role
from .routes.api import router as api_router
from .services.test_service import EXIT_HARNESS_ERROR, TestService

def setup_logging():
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

def run_cli(args=None):
    args = args or []
    roles = [a for a in args if a in {r.value for r in Role}]
    ids = [a for a in args if a not in roles]
    unknown = sorted(set(ids) - {case.id for case in ALL_CASES})
    if unknown:
        logging.error(f"Unknown test case id(s): {', '.join(unknown)}")
        return EXIT_HARNESS_ERROR
    if not select_cases(roles or None, ids or None):
        logging.error(f"No test cases match selection: {' '.join(args)}")
        return EXIT_HARNESS_ERROR
    service = TestService(Config)
    try:
        report = service.run_and_report(roles=roles or None, ids=ids or None)
    except KeyboardInterrupt:
        logging.warning('Test run interrupted by user.')
        return EXIT_HARNESS_ERROR
    except Exception as e:
        logging.error(f'Test run failed with error: {e}')
        return EXIT_HARNESS_ERROR
    return report['exit_code']

def create_app():
    app = FastAPI(title="Singlish Translator E2E")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app

def run_api():
    uvicorn.run(create_app(), host="0.0.0.0", port=int(os.getenv("PORT", 8000)))

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    mode = os.getenv('MODE', 'cli').lower()
    if argv and argv[0] in ('cli', 'api'):
        mode, argv = argv[0], argv[1:]
    if mode == 'api':
        run_api()
        return 0
    return run_cli(argv)

if __name__ == '__main__':
    sys.exit(main())

# Usage:
#   python -m singlish_e2e.main                   # CLI mode (default), all cases
#   python -m singlish_e2e.main cli negative      # only negative cases
#   python -m singlish_e2e.main cli Pos_UI_0001   # a single case by id
#   python -m singlish_e2e.main api               # API server mode
#   MODE=api python -m singlish_e2e.main          # API server mode via env
