import os
import logging
import logging.handlers as handlers

logging.basicConfig(format='%(asctime)s %(levelname)s %(message)s', level=logging.INFO)

logger = logging.getLogger('app')

logHandler = handlers.RotatingFileHandler('log.txt', maxBytes=1000000, backupCount=2)
formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
logHandler.setFormatter(formatter)
logger.addHandler(logHandler)

import rumps

from menubar_uploader import MenuBarUploader
from nightscout_connector import NightscoutConnector
from nightscout_data import Settings

REFRESH_INTERVAL_IN_SECONDS = 60


if __name__ == '__main__':
    settings = Settings.from_environ(os.environ)

    uploader = MenuBarUploader(name="Nightscout", nightscout_url=settings.nightscout_url,
                               use_legacy_status_item=settings.use_legacy_status_item)
    nightscout_connector = NightscoutConnector(uploader=uploader, settings=settings)
    uploader.set_refresh_callback(nightscout_connector.update)

    timer = rumps.Timer(lambda _sender: nightscout_connector.update(), REFRESH_INTERVAL_IN_SECONDS)
    timer.start()

    logger.info("Polling {0} every {1} seconds".format(settings.nightscout_url or "<unset>",
                                                        REFRESH_INTERVAL_IN_SECONDS))
    uploader.run()
