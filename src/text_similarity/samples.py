"""Built-in sample posts compared when no texts are given on the command line."""

SAMPLE_TEXT_1 = (
    "#PredatorBadlands feels like Avatar meets the MCU, turning the Predator into a "
    "full-on antihero — think Mad Max or Wolverine — AND IT WORKS! It’s a "
    "90s-style, non-stop action adventure the entire runtime and never pushes any "
    "pencils, easily the best modern Predator sequel."
)

SAMPLE_TEXT_2 = (
    "An effective operation demonstrating what a skilled drone operator is capable of: "
    "clearing a building of Russian infantry from the inside without putting an entire "
    "unit of our own soldiers at risk Thanks to the outstanding team of SOF drone "
    "operators for sharing their work — together, we always supported them and will "
    "continue to do so on a regular basis."
)
