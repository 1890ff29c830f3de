import customtkinter as ctk


class AlertBanner(ctk.CTkFrame):
    """A colored banner for non-blocking messages such as load errors."""

    def __init__(self, master, message: str, color: str = "#F44336", **kwargs):
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", justify="left", wraplength=700, padx=10, pady=6,
        ).grid(row=0, column=0, sticky="ew")
