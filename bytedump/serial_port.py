"""This module implements capturing raw bytes from a serial port, so that
   traffic on a serial line can be hex dumped.

"""

import serial

DEFAULT_BAUD = 115200


class SerialPort():
    """Captures bytes from a PySerial port.

       port may be a device name (/dev/ttyUSB0, COM3) or any URL understood
       by serial.serial_for_url (loop://, socket://host:port, ...).
    """

    def __init__(self, port, baud=DEFAULT_BAUD, timeout=0.5):
        self.serial_port = serial.serial_for_url(port,
                                                 baudrate=baud,
                                                 timeout=timeout,
                                                 bytesize=serial.EIGHTBITS,
                                                 parity=serial.PARITY_NONE,
                                                 stopbits=serial.STOPBITS_ONE,
                                                 xonxoff=False,
                                                 rtscts=False,
                                                 dsrdtr=False)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def read_bytes(self, count):
        """Reads up to count bytes from the port. Reading stops early if
        the timeout expires without any more data arriving, so the returned
        bytearray may be shorter than count.

        """
        data = bytearray()
        while len(data) < count:
            chunk = self.serial_port.read(count - len(data))
            if not chunk:
                break
            data.extend(chunk)
        return data

    def write_packet(self, packet_data):
        """Writes raw bytes to the port."""
        self.serial_port.write(packet_data)

    def close(self):
        """Closes the underlying serial port."""
        self.serial_port.close()
