import customtkinter as ctk

from services.auth_service import AuthService
from services.errors import ValidationError
from ui.components.background import run_in_background
from utils.constants import APP_NAME


class _AuthDialog(ctk.CTkToplevel):
    def __init__(self, master, auth_service: AuthService, title: str, **kwargs):
        super().__init__(master, **kwargs)
        self._auth = auth_service
        self.title(title)
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)
        self._field_errors: dict[str, ctk.StringVar] = {}
        self._form_error = ctk.StringVar()

    def _header(self, text, row) -> int:
        ctk.CTkLabel(
            self, text=text, font=ctk.CTkFont(size=18, weight="bold"),
        ).grid(row=row, column=0, padx=24, pady=(20, 8), sticky="w")
        ctk.CTkLabel(
            self, textvariable=self._form_error, text_color="#F44336",
            wraplength=300, anchor="w", justify="left",
        ).grid(row=row + 1, column=0, padx=24, sticky="ew")
        return row + 2

    def _field(self, row, label, field, var, show=None) -> int:
        ctk.CTkLabel(self, text=label, anchor="w").grid(
            row=row, column=0, padx=24, pady=(6, 0), sticky="w"
        )
        ctk.CTkEntry(
            self, textvariable=var, width=300, show=show,
        ).grid(row=row + 1, column=0, padx=24, sticky="ew")
        err = ctk.StringVar()
        self._field_errors[field] = err
        ctk.CTkLabel(
            self, textvariable=err, text_color="#F44336",
            font=ctk.CTkFont(size=11), anchor="w",
        ).grid(row=row + 2, column=0, padx=24, sticky="w")
        return row + 3

    def _show_errors(self, errors: dict[str, str]):
        for field, var in self._field_errors.items():
            var.set(errors.get(field, ""))
        self._form_error.set(errors.get("form", ""))

    def _center(self):
        self.update_idletasks()
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        x = (self.winfo_screenwidth() - w) // 2
        y = (self.winfo_screenheight() - h) // 3
        self.geometry(f"+{x}+{y}")


class LoginDialog(_AuthDialog):
    """Email/password sign-in. .authenticated is True once a token is stored."""

    def __init__(self, master, auth_service: AuthService, **kwargs):
        super().__init__(master, auth_service, f"Sign in to {APP_NAME}", **kwargs)
        self.authenticated = False

        self._email_var = ctk.StringVar()
        self._password_var = ctk.StringVar()

        r = self._header(f"Welcome to {APP_NAME}!", 0)
        r = self._field(r, "Email", "email", self._email_var)
        r = self._field(r, "Password", "password", self._password_var, show="•")

        self._submit_btn = ctk.CTkButton(self, text="Sign in", command=self._on_submit)
        self._submit_btn.grid(row=r, column=0, padx=24, pady=(12, 4), sticky="ew")
        r += 1

        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.grid(row=r, column=0, padx=24, pady=(4, 20), sticky="ew")
        ctk.CTkLabel(footer, text="Don't have an account?").pack(side="left")
        ctk.CTkButton(
            footer, text="Sign up", width=70, fg_color="transparent",
            text_color=("#1f6aa5", "#5aa0e0"), command=self._open_signup,
        ).pack(side="left", padx=4)

        self.bind("<Return>", lambda e: self._on_submit())
        self.grab_set()
        self._center()

    def _on_submit(self):
        self._show_errors({})
        email, password = self._email_var.get(), self._password_var.get()
        self._submit_btn.configure(state="disabled", text="Signing in…")
        run_in_background(
            self, lambda: self._auth.login(email, password),
            self._on_success, self._on_failure,
        )

    def _on_success(self, _result):
        self.authenticated = True
        self.destroy()

    def _on_failure(self, exc: Exception):
        self._submit_btn.configure(state="normal", text="Sign in")
        if isinstance(exc, ValidationError):
            self._show_errors(exc.errors)
        else:
            self._show_errors({"form": str(exc) or "Sign in failed."})

    def _open_signup(self):
        self.grab_release()
        dlg = SignupDialog(self, self._auth)
        self.wait_window(dlg)
        if self.winfo_exists():
            self.grab_set()
            if dlg.registered:
                self._email_var.set(dlg.email)
                self._form_error.set("Account created. Please sign in.")


class SignupDialog(_AuthDialog):
    """Account creation with per-field validation messages."""

    def __init__(self, master, auth_service: AuthService, **kwargs):
        super().__init__(master, auth_service, "Create Account", **kwargs)
        self.registered = False
        self.email = ""

        self._name_var = ctk.StringVar()
        self._email_var = ctk.StringVar()
        self._password_var = ctk.StringVar()
        self._confirm_var = ctk.StringVar()
        # Editing a field clears its error
        for field, var in (("name", self._name_var), ("email", self._email_var),
                           ("password", self._password_var),
                           ("confirm_password", self._confirm_var)):
            var.trace_add("write", lambda *_, f=field: self._clear_error(f))

        r = self._header("Create your account", 0)
        r = self._field(r, "Full Name", "name", self._name_var)
        r = self._field(r, "Email", "email", self._email_var)
        r = self._field(r, "Password", "password", self._password_var, show="•")
        r = self._field(r, "Confirm Password", "confirm_password", self._confirm_var, show="•")

        self._submit_btn = ctk.CTkButton(self, text="Create Account", command=self._on_submit)
        self._submit_btn.grid(row=r, column=0, padx=24, pady=(12, 4), sticky="ew")
        r += 1
        ctk.CTkButton(
            self, text="Already have an account? Sign in", fg_color="transparent",
            text_color=("#1f6aa5", "#5aa0e0"), command=self.destroy,
        ).grid(row=r, column=0, padx=24, pady=(4, 20))

        self.transient(master)
        self.grab_set()
        self._center()

    def _clear_error(self, field):
        if field in self._field_errors:
            self._field_errors[field].set("")

    def _on_submit(self):
        values = (
            self._name_var.get(), self._email_var.get(),
            self._password_var.get(), self._confirm_var.get(),
        )
        self._show_errors({})
        self._submit_btn.configure(state="disabled", text="Creating account…")
        run_in_background(
            self, lambda: self._auth.register(*values),
            self._on_success, self._on_failure,
        )

    def _on_success(self, _user):
        self.registered = True
        self.email = self._email_var.get().strip()
        self.destroy()

    def _on_failure(self, exc: Exception):
        self._submit_btn.configure(state="normal", text="Create Account")
        if isinstance(exc, ValidationError):
            self._show_errors(exc.errors)
        else:
            self._show_errors({"form": str(exc) or "Registration failed. Please try again."})
