import argparse
import logging
import sys
from pathlib import Path
from config import get_config
from engine import handle_xml_bytes

cfg = get_config()

def configure_logging():
    logging.basicConfig(
        level=getattr(logging, str(cfg.logging.level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

def serve():
    import uvicorn
    from api import app
    host, port = cfg.api.host, cfg.api.port
    logging.info("Server is running on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level="debug" if cfg.api.debug else "info")

def check(xmlpath) -> int:
    #Runs one XML document through the same pipeline the endpoint uses
    xmlbytes = Path(xmlpath).read_bytes()
    rendered = handle_xml_bytes(xmlbytes)
    sys.stdout.write(rendered.body.decode("utf-8"))
    return 0 if rendered.status_code == 200 else 1

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="XML envelope gateway")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="run the HTTP endpoint")
    check_parser = sub.add_parser("check", help="validate one XML file and print the response")
    check_parser.add_argument("xmlpath")
    args = parser.parse_args(argv)

    configure_logging()
    if args.command == "check":
        return check(args.xmlpath)
    serve()
    return 0

if __name__ == "__main__":
    sys.exit(main())
