import os, sys

ALLOWED_SERVICES = {"api"}
PORT = os.getenv("PORT", "8000")

def exec_cmd(cmd):
    os.execvp(cmd[0], cmd)

def detect_service(environ):
    raw_service = environ.get("IMPORTMGR_SERVICE", "").lower().strip()
    if raw_service in ALLOWED_SERVICES:
        return raw_service
    return "api"

def main() -> None:
    raw_service = os.environ.get("IMPORTMGR_SERVICE", "").lower().strip()
    service = detect_service(os.environ)
    if raw_service and raw_service not in ALLOWED_SERVICES:
        print(f"Warning: IMPORTMGR_SERVICE={raw_service} is invalid; defaulting to api")

    print(f"Import manager launcher: service={service} port={PORT}")

    if service == "api":
        exec_cmd(
            [
                "uvicorn",
                "importmgr_api.main:create_app",
                "--factory",
                "--app-dir",
                "apps/api/src",
                "--host",
                "0.0.0.0",
                "--port",
                PORT,
            ]
        )
    else:
        print("Set IMPORTMGR_SERVICE=api")
        sys.exit(1)


if __name__ == "__main__":
    main()
