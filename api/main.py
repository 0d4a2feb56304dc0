from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers.compose_images import router as compose_router

ALLOWED_ORIGINS = ["*"]


def create_app() -> FastAPI:
	app = FastAPI(title="Side-by-Side Compositor API", version="0.1.0")

	# browser clients post the two photos straight from a page
	app.add_middleware(
		CORSMiddleware,
		allow_origins=ALLOWED_ORIGINS,
		allow_credentials=False,
		allow_methods=["GET", "POST"],
		allow_headers=["*"],
	)

	app.include_router(compose_router)
	return app


app = create_app()


if __name__ == "__main__":
	# uvicorn api.main:app --reload
	import uvicorn

	uvicorn.run("api.main:app", host="127.0.0.1", port=8000, reload=True)
